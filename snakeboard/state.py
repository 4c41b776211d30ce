"""Board state and movement rules for the snake game."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, TextIO

DEFAULT_BOARD_WIDTH = 20
DEFAULT_BOARD_HEIGHT = 18

# A line read from a board file holds at most this many characters.
MAX_LINE_LENGTH = 99

_TAIL_CHARS = frozenset("wasd")
_HEAD_CHARS = frozenset("WASDx")
_SNAKE_CHARS = frozenset("wasd^<v>WASDx")
_DOWN_CHARS = frozenset("vsS")
_UP_CHARS = frozenset("^wW")
_RIGHT_CHARS = frozenset(">dD")
_LEFT_CHARS = frozenset("<aA")
_BODY_TO_TAIL = {"^": "w", "<": "a", "v": "s", ">": "d"}
_HEAD_TO_BODY = {"W": "^", "A": "<", "S": "v", "D": ">"}

FoodFunction = Callable[["GameState"], object]


def is_tail(c: str) -> bool:
    """Return True if ``c`` is a tail character (one of "wasd")."""
    return c in _TAIL_CHARS


def is_head(c: str) -> bool:
    """Return True if ``c`` is a head character (one of "WASDx")."""
    return c in _HEAD_CHARS


def is_snake(c: str) -> bool:
    """Return True if ``c`` is any part of a snake ("wasd^<v>WASDx")."""
    return c in _SNAKE_CHARS


def body_to_tail(c: str) -> str:
    """Map a body character ("^<v>") to its tail character, or '?'."""
    return _BODY_TO_TAIL.get(c, "?")


def head_to_body(c: str) -> str:
    """Map a head character ("WASD") to its body character, or '?'."""
    return _HEAD_TO_BODY.get(c, "?")


def get_next_row(cur_row: int, c: str) -> int:
    """Return the row reached by moving one step in the direction of ``c``."""
    if c in _DOWN_CHARS:
        return cur_row + 1
    if c in _UP_CHARS:
        return cur_row - 1
    return cur_row


def get_next_col(cur_col: int, c: str) -> int:
    """Return the column reached by moving one step in the direction of ``c``."""
    if c in _RIGHT_CHARS:
        return cur_col + 1
    if c in _LEFT_CHARS:
        return cur_col - 1
    return cur_col


@dataclass
class Snake:
    """Position of a snake's tail and head, and whether it is alive."""

    tail_row: int = 0
    tail_col: int = 0
    head_row: int = 0
    head_col: int = 0
    live: bool = True


@dataclass
class GameState:
    """A board of characters and the snakes that move on it."""

    board: list = field(default_factory=list)
    snakes: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.board = [list(row) for row in self.board]

    @property
    def num_rows(self) -> int:
        return len(self.board)

    @property
    def num_snakes(self) -> int:
        return len(self.snakes)

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.board)

    def get_board_at(self, row: int, col: int) -> str:
        """Return the character at ``(row, col)``."""
        return self.board[row][col]

    def set_board_at(self, row: int, col: int, ch: str) -> None:
        """Place ``ch`` at ``(row, col)``."""
        self.board[row][col] = ch

    def print_board(self, fp: TextIO) -> None:
        """Write every row of the board, each followed by a newline."""
        fp.write(str(self))

    def save_board(self, filename) -> None:
        """Write the board to ``filename``."""
        with open(filename, "w", encoding="utf-8", newline="") as f:
            self.print_board(f)

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < len(self.board[row])

    def _next_head_position(self, snum: int) -> tuple[int, int, str]:
        snake = self.snakes[snum]
        head_char = self.board[snake.head_row][snake.head_col]
        return (
            get_next_row(snake.head_row, head_char),
            get_next_col(snake.head_col, head_char),
            head_char,
        )

    def next_square(self, snum: int) -> str:
        """Return the character the snake's head is about to move into.

        A square outside the board reads as ' '.
        """
        next_row, next_col, _ = self._next_head_position(snum)
        if not self._in_bounds(next_row, next_col):
            return " "
        return self.board[next_row][next_col]

    def update_head(self, snum: int) -> None:
        """Move the head one step, leaving a body character behind."""
        snake = self.snakes[snum]
        next_row, next_col, head_char = self._next_head_position(snum)
        self.board[snake.head_row][snake.head_col] = head_to_body(head_char)
        self.board[next_row][next_col] = head_char
        snake.head_row, snake.head_col = next_row, next_col

    def update_tail(self, snum: int) -> None:
        """Move the tail one step, blanking the old tail square."""
        snake = self.snakes[snum]
        tail_char = self.board[snake.tail_row][snake.tail_col]
        next_row = get_next_row(snake.tail_row, tail_char)
        next_col = get_next_col(snake.tail_col, tail_char)
        self.board[snake.tail_row][snake.tail_col] = " "
        self.board[next_row][next_col] = body_to_tail(self.board[next_row][next_col])
        snake.tail_row, snake.tail_col = next_row, next_col

    def update_state(self, add_food: Optional[FoodFunction]) -> None:
        """Advance every live snake by one step.

        A snake moving into a wall or another snake dies; one moving onto
        food grows and ``add_food`` is called to place new food.
        """
        for snum, snake in enumerate(self.snakes):
            if not snake.live:
                continue
            next_char = self.next_square(snum)
            if next_char == " ":
                self.update_head(snum)
                self.update_tail(snum)
            elif next_char == "*":
                self.update_head(snum)
                if add_food is None:
                    raise ValueError("a snake ate food but no food function was given")
                add_food(self)
            elif next_char == "#" or is_snake(next_char):
                snake.live = False
                self.board[snake.head_row][snake.head_col] = "x"

    def find_head(self, snum: int) -> None:
        """Trace the snake from its tail and record where its head is."""
        snake = self.snakes[snum]
        row, col = snake.tail_row, snake.tail_col
        seen = set()
        c = self.board[row][col]
        while not is_head(c):
            seen.add((row, col))
            row, col = get_next_row(row, c), get_next_col(col, c)
            if (row, col) in seen or not self._in_bounds(row, col):
                raise ValueError(
                    f"snake starting at ({snake.tail_row}, {snake.tail_col}) has no head"
                )
            c = self.board[row][col]
        snake.head_row, snake.head_col = row, col

    def initialize_snakes(self) -> "GameState":
        """Find every snake on the board from its tail and return the state."""
        self.snakes = [
            Snake(tail_row=r, tail_col=c)
            for r, row in enumerate(self.board)
            for c, ch in enumerate(row)
            if is_tail(ch)
        ]
        for snum in range(len(self.snakes)):
            self.find_head(snum)
        return self


def create_default_state() -> GameState:
    """Return the 20x18 starting board with one snake and one food."""
    wall = "#" * DEFAULT_BOARD_WIDTH
    empty = "#" + " " * (DEFAULT_BOARD_WIDTH - 2) + "#"
    rows: list[str] = []
    for i in range(DEFAULT_BOARD_HEIGHT):
        if i in (0, DEFAULT_BOARD_HEIGHT - 1):
            rows.append(wall)
        elif i == 2:
            rows.append("# d>D    *         #")
        else:
            rows.append(empty)
    return GameState(rows, [Snake(tail_row=2, tail_col=2, head_row=2, head_col=4, live=True)])


def read_line(fp: TextIO) -> Optional[str]:
    """Read one line, newline included, of at most 99 characters.

    Returns None at end of input.
    """
    line = fp.readline(MAX_LINE_LENGTH)
    return line or None


def _lines(fp: TextIO) -> Iterable[str]:
    while (line := read_line(fp)) is not None:
        yield line[:-1] if line.endswith("\n") else line


def load_board(fp: TextIO) -> GameState:
    """Read a board from ``fp``; snakes are not located yet."""
    return GameState(list(_lines(fp)), [])