"""Password strength rules.

A password is accepted when it is at least ten characters long, holds an
upper case letter, a lower case letter and a digit, and contains neither
the person's first name nor their last name (case sensitive).
"""

from __future__ import annotations

MIN_LENGTH = 10


def check_length(password: str) -> bool:
    """Return True if ``password`` is at least ten characters long."""
    return len(password) >= MIN_LENGTH


def check_range(letter: str, lower: str, upper: str) -> bool:
    """Return True if ``letter`` lies in the inclusive range [lower, upper]."""
    return lower <= letter <= upper


def check_upper(password: str) -> bool:
    """Return True if ``password`` holds at least one letter A-Z."""
    return any(check_range(ch, "A", "Z") for ch in password)


def check_lower(password: str) -> bool:
    """Return True if ``password`` holds at least one letter a-z."""
    return any(check_range(ch, "a", "z") for ch in password)


def check_number(password: str) -> bool:
    """Return True if ``password`` holds at least one digit 0-9."""
    return any(check_range(ch, "0", "9") for ch in password)


def check_name(first_name: str, last_name: str, password: str) -> bool:
    """Return True if neither name appears in ``password``."""
    return first_name not in password and last_name not in password


def check_password(first_name: str, last_name: str, password: str) -> bool:
    """Return True if ``password`` meets every rule."""
    return (
        check_lower(password)
        and check_length(password)
        and check_name(first_name, last_name, password)
        and check_upper(password)
        and check_number(password)
    )