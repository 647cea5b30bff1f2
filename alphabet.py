# alphabet.py
from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

_index: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def mod(n: int, m: int = SIZE) -> int:
    """Remainder in ``[0, m)``, also for negative *n* (Python floors)."""
    return n % m


def is_letter(ch: str) -> bool:
    return ch in _index


def to_index(letter: str) -> int:
    try:
        return _index[letter]
    except KeyError:
        raise ValueError(f"Invalid character {letter!r} for alphabet A-Z.")


def to_letter(index: int) -> str:
    return ALPHABET[mod(index)]
