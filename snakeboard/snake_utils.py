"""Food placement, steering and random turns for the snake game."""

from __future__ import annotations

from dataclasses import dataclass

from snakeboard.state import GameState

# Keys used to steer the player's snake.
KEY_MOVEUP = "w"
KEY_MOVERIGHT = "d"
KEY_MOVEDOWN = "s"
KEY_MOVELEFT = "a"
KEY_QUIT = "q"

_MASK32 = 0xFFFFFFFF
_FEEDBACK = 0x80000057
_REDIRECTS = {
    KEY_MOVEUP: "W",
    KEY_MOVELEFT: "A",
    KEY_MOVEDOWN: "S",
    KEY_MOVERIGHT: "D",
}
_TURN_CHARS = "<v>^"


def det_rand(value: int) -> int:
    """Advance a 32-bit LFSR state by one step and return the new state.

    A state of zero is treated as one.
    """
    value &= _MASK32
    if value == 0:
        value = 1
    if value & 1:
        return (value >> 1) ^ _FEEDBACK
    return value >> 1


@dataclass
class DetRandom:
    """A deterministic pseudo-random sequence built on :func:`det_rand`."""

    state: int = 1

    def next(self) -> int:
        """Advance the sequence and return its new value."""
        self.state = det_rand(self.state)
        return self.state


_food_random = DetRandom()
_turn_random = DetRandom()


def deterministic_food(state: GameState) -> tuple[int, int]:
    """Place food on a blank square chosen by the deterministic sequence.

    Returns the ``(row, col)`` where the food was placed.
    Raises ValueError if the board has no blank square.
    """
    if not any(" " in row for row in state.board):
        raise ValueError("no empty square left for food")
    while True:
        row = _food_random.next() % state.num_rows
        width = len(state.board[row])
        draw = _food_random.next()
        if width and state.board[row][draw % width] == " ":
            col = draw % width
            break
    state.board[row][col] = "*"
    return row, col


def corner_food(state: GameState) -> tuple[int, int]:
    """Place food at row 1, column 1 and return that position."""
    state.board[1][1] = "*"
    return 1, 1


def redirect_snake(state: GameState, input_direction: str) -> None:
    """Point the player's snake (the first one) in the direction of a key.

    Keys other than w, a, s and d are ignored, as is a dead snake.
    """
    snake = state.snakes[0]
    if not snake.live:
        return
    head = _REDIRECTS.get(input_direction)
    if head is not None:
        state.board[snake.head_row][snake.head_col] = head


def random_turn(state: GameState, snum: int) -> None:
    """Turn snake ``snum`` left or right at random."""
    snake = state.snakes[snum]
    current = state.board[snake.head_row][snake.head_col]
    index = _TURN_CHARS.find(current)
    if index < 0:
        index = len(_TURN_CHARS)
    index += 1 if _turn_random.next() % 2 == 0 else -1
    state.board[snake.head_row][snake.head_col] = _TURN_CHARS[index % len(_TURN_CHARS)]