"""Play the snake game in a terminal, steering with the keyboard."""

from __future__ import annotations

import os
import sys
import threading
from typing import Optional, TextIO

from snakeboard.snake_utils import deterministic_food, random_turn, redirect_snake
from snakeboard.state import GameState, create_default_state, load_board

try:
    import termios
    import tty
except ImportError:  # not available on every platform
    termios = None
    tty = None

NS_PER_SECOND = 1_000_000_000
STEP_NS = 100_000_000
TURN_PERIOD = 6
CLEAR_SCREEN = "\033[2J\033[H"
USAGE = "Usage: interactive-snake [-i filename] [-d delay]"


def read_key(stream: TextIO) -> Optional[str]:
    """Read one key from ``stream``, unbuffered and unechoed on a terminal.

    Returns None at end of input.
    """
    try:
        fd = stream.fileno()
        is_terminal = os.isatty(fd)
    except (AttributeError, OSError, ValueError):
        is_terminal = False
    if not is_terminal or termios is None:
        return stream.read(1) or None

    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd, termios.TCSANOW)
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return data.decode("latin-1") if data else None


class InteractiveGame:
    """A game that advances on a timer while keys steer the first snake."""

    def __init__(self, state: GameState, interval: float = 1.0) -> None:
        self.state = state
        self._interval_ns = int(round(interval * NS_PER_SECOND))
        self._lock = threading.RLock()
        self._timestep = 0
        self._stop = threading.Event()

    @property
    def interval(self) -> float:
        """Seconds between game steps."""
        return self._interval_ns / NS_PER_SECOND

    def slower(self) -> None:
        """Lengthen the step interval by a tenth of a second."""
        with self._lock:
            seconds, nanos = divmod(self._interval_ns, NS_PER_SECOND)
            if nanos >= 9 * STEP_NS:
                self._interval_ns = (seconds + 1) * NS_PER_SECOND
            else:
                self._interval_ns += STEP_NS

    def faster(self) -> None:
        """Shorten the step interval by a tenth of a second, down to 0.1s."""
        with self._lock:
            seconds, nanos = divmod(self._interval_ns, NS_PER_SECOND)
            if nanos == 0:
                if seconds > 0:
                    self._interval_ns -= STEP_NS
            elif seconds > 0 or nanos > STEP_NS:
                self._interval_ns -= STEP_NS

    def handle_key(self, key: str) -> None:
        """React to a key: '[' slows down, ']' speeds up, others steer."""
        with self._lock:
            if key == "[":
                self.slower()
            elif key == "]":
                self.faster()
            else:
                redirect_snake(self.state, key)

    def step(self) -> int:
        """Advance the game one step; return how many snakes were alive before it.

        Computer-controlled snakes turn at random every sixth step.
        """
        with self._lock:
            live = 0
            for snum, snake in enumerate(self.state.snakes):
                if snake.live:
                    live += 1
                    if snum >= 1 and self._timestep % TURN_PERIOD == 0:
                        random_turn(self.state, snum)
            self.state.update_state(deterministic_food)
            self._timestep += 1
        return live

    def _render(self) -> None:
        with self._lock:
            sys.stdout.write(CLEAR_SCREEN)
            self.state.print_board(sys.stdout)
            sys.stdout.flush()

    def _game_loop(self) -> None:
        while not self._stop.wait(self.interval):
            live = self.step()
            self._render()
            if live == 0:
                break

    def run(self) -> None:
        """Run the game until standard input is exhausted."""
        self._stop.clear()
        self._render()
        game = threading.Thread(target=self._game_loop, daemon=True)
        game.start()
        try:
            while (key := read_key(sys.stdin)) is not None:
                self.handle_key(key)
                self._render()
        finally:
            self._stop.set()
            game.join()


def _parse_delay(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        print(f"Error parsing delay: {text!r}", file=sys.stderr)
        return 0.0


def main(argv=None) -> int:
    """Start an interactive game; returns 1 on a usage or file error."""
    args = sys.argv[1:] if argv is None else list(argv)
    in_filename = None
    delay = 1.0
    it = iter(args)
    for arg in it:
        value = next(it, None) if arg in ("-i", "-d") else None
        if arg == "-i" and value is not None:
            in_filename = value
        elif arg == "-d" and value is not None:
            delay = _parse_delay(value)
        else:
            print(USAGE, file=sys.stderr)
            return 1

    if in_filename is not None:
        try:
            with open(in_filename, encoding="utf-8", newline="") as fp:
                state = load_board(fp)
        except OSError as exc:
            print(f"Error opening board file: {exc}", file=sys.stderr)
            return 1
        state.initialize_snakes()
    else:
        state = create_default_state()

    try:
        InteractiveGame(state, delay).run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())