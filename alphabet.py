# alphabet.py
from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def mod(n: int, m: int = SIZE) -> int:
    """Mathematical modulo: always in [0, m), also for negative *n*."""
    return ((n % m) + m) % m


def index_of(symbol: str) -> int:
    try:
        return _INDEX[symbol]
    except KeyError:
        raise ValueError(f"Invalid character {symbol!r} for alphabet.")


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch.upper() in _INDEX
