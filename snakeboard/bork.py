"""Translate English to Bork: every lower case vowel is followed by an 'f'."""

from __future__ import annotations

import sys

_VOWELS = frozenset("aeiou")


def translate_char(c: str) -> str:
    """Return the Bork form of a single character."""
    return c + "f" if c in _VOWELS else c


def translate(text: str) -> str:
    """Return ``text`` translated to Bork."""
    return "".join(translate_char(c) for c in text)


def main(argv=None) -> int:
    """Translate the first argument and report it; returns 1 without one."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Remember to give me a string to translate to Bork!")
        return 1
    source = args[0]
    result = translate(source)
    print(f'Input string: "{source}"')
    print(f"Length of translated string: {len(result)}")
    print(f'Translate to Bork: "{result}"')
    return 0


if __name__ == "__main__":
    sys.exit(main())