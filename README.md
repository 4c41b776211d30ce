# snakeboard

snakeboard is a snake game whose board is plain text. Boards are stored as `.snk` files, with one line per row:

- walls are `#`
- food is `*`
- empty squares are spaces

Each snake is drawn with the following characters. Every character points toward the next segment.

- tail: `w a s d`
- body: `^ < v >`
- head: `W A S D`, or `x` once the snake has died

The package can advance a board by one step. It also has a small interactive terminal game.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install .[test]
```

## Commands

### `snake`: advance a board by one step

```
snake -i board.snk -o next.snk
snake --stdin < board.snk
snake
```

Input:

- `-i FILE` reads the board from a file.
- `--stdin` reads the board from standard input.
- With neither option, the default board is used. It is 18 rows by 20 columns and holds one snake and one piece of food.
- `-i` and `--stdin` cannot be combined.

Output:

- The new board is written to the file given with `-o`, or to standard output.

Behaviour:

- A snake that moves into a wall or into any snake dies, and its head becomes `x`.
- A snake that moves onto food grows by one square. New food is then placed on an empty square. The square is chosen by a deterministic generator, so runs can be reproduced.
- A usage error prints a usage line and exits with status 1.
- If the input file cannot be opened, the command exits with a non-zero status.

### `interactive-snake`: play in the terminal

```
interactive-snake [-i board.snk] [-d delay]
```

Options:

- `-i` loads a board from a file. Without it, the default board is used.
- `-d` sets the starting delay between steps, in seconds. The default is 1.

Keys:

- `w`, `a`, `s` and `d` steer the first snake.
- `[` makes the game slower by 0.1 s per step.
- `]` makes it faster by 0.1 s per step, down to 0.1 s.

During play:

- Every other snake turns left or right at random every sixth step.
- The screen is redrawn after every step and every key press.
- The step loop stops once no snake is alive.

Limits:

- There is no quit key. The game runs until standard input ends or it is interrupted with Ctrl-C.
- Keys are read one at a time without echo only where the `termios` module is available. Elsewhere, input is read from the stream as it arrives.

### `bork`: Bork translator

```
bork "hello world"
```

This command puts an `f` after every lowercase vowel. It prints three lines: the input, the length of the translation, and the translation. Without an argument it prints a reminder and exits with status 1.

## Library use

```python
from snakeboard.state import create_default_state, load_board
from snakeboard.snake_utils import deterministic_food, corner_food

state = create_default_state()
state.update_state(deterministic_food)
state.save_board("next.snk")

with open("board.snk") as fp:
    state = load_board(fp).initialize_snakes()
state.update_state(corner_food)
print(state)
```

### `snakeboard.state`

`GameState` holds the board as rows of characters, along with a list of `Snake` records. Each record gives the tail position, the head position and whether the snake is alive (`live`).

`GameState` methods:

| Method | What it does |
|---|---|
| `get_board_at`, `set_board_at` | read or write one square |
| `print_board(fp)`, `save_board(filename)` | write the board |
| `next_square(snum)` | shows the square a snake is about to enter |
| `update_head(snum)` | moves the head only |
| `update_tail(snum)` | moves the tail only |
| `update_state(add_food)` | advances every live snake |
| `find_head(snum)` | locates a snake's head from its tail |
| `initialize_snakes()` | locates every snake on the board |

Functions:

- `create_default_state()` builds the default board.
- `load_board(fp)` reads a board without locating its snakes.
- `read_line(fp)` reads one line of at most 99 characters.
- Character helpers: `is_tail`, `is_head`, `is_snake`, `body_to_tail`, `head_to_body`, `get_next_row` and `get_next_col`.

Errors:

- If a snake eats food and `update_state` was given no food function, it raises `ValueError`.
- `find_head` raises `ValueError` if a snake's trail leaves the board or loops without reaching a head.

### `snakeboard.snake_utils`

Food functions:

- `deterministic_food(state)` places food on a blank square and returns its position. It raises `ValueError` if the board has no blank square.
- `corner_food(state)` always places food at row 1, column 1.

Steering:

- `redirect_snake(state, key)` turns the first snake according to `w`/`a`/`s`/`d`.
- `random_turn(state, snum)` turns a snake left or right.

Randomness:

- `det_rand(value)` is one step of a 32-bit LFSR.
- `DetRandom` wraps it as a sequence; call `.next()` to advance.

### Other modules

- `snakeboard.pwd_checker.check_password(first_name, last_name, password)` returns `True` only if the password meets all of these rules:
  - it has at least 10 characters;
  - it contains an uppercase letter, a lowercase letter and a digit;
  - it contains neither name (case sensitive).

  The individual checks are also available: `check_length`, `check_upper`, `check_lower`, `check_number`, `check_name` and `check_range`.
- `snakeboard.vector.Vector` is an integer sequence that starts as `[0]`.
  - Reading past the end returns 0.
  - Setting past the end grows the vector and fills the gap with zeros.
  - Negative or non-integer locations raise `IndexError` or `TypeError`.
- `snakeboard.bork.translate(text)` and `translate_char(c)` do the same translation as the `bork` command.