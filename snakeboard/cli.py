"""Command that advances a snake board by one step."""

from __future__ import annotations

import sys

from snakeboard.snake_utils import deterministic_food
from snakeboard.state import create_default_state, load_board

USAGE = "Usage: snake [-i filename | --stdin] [-o filename]"


class _UsageError(Exception):
    pass


def _parse_args(args):
    in_filename = None
    out_filename = None
    use_stdin = False
    it = iter(args)
    for arg in it:
        if arg == "-i":
            value = next(it, None)
            if value is None or use_stdin:
                raise _UsageError
            in_filename = value
        elif arg == "--stdin":
            if in_filename is not None:
                raise _UsageError
            use_stdin = True
        elif arg == "-o":
            value = next(it, None)
            if value is None:
                raise _UsageError
            out_filename = value
        else:
            raise _UsageError
    return in_filename, use_stdin, out_filename


def main(argv=None) -> int:
    """Load a board (or the default one), advance it one step and write it.

    Returns 1 on a usage error and -1 if the input file cannot be opened.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        in_filename, use_stdin, out_filename = _parse_args(args)
    except _UsageError:
        print(USAGE, file=sys.stderr)
        return 1

    if in_filename is not None:
        try:
            with open(in_filename, encoding="utf-8", newline="") as fp:
                state = load_board(fp)
        except OSError:
            return -1
        state.initialize_snakes()
    elif use_stdin:
        state = load_board(sys.stdin).initialize_snakes()
    else:
        state = create_default_state()

    state.update_state(deterministic_food)

    if out_filename is not None:
        state.save_board(out_filename)
    else:
        state.print_board(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())