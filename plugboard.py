# plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from alphabet import is_letter
from debug import Debug

debug = Debug()

Pair = tuple[str, str]

MAX_PAIRS = 13


def plugboard_swap(symbol: str, pairs: Sequence[Pair]) -> str:
    """Return the partner of *symbol* in the first pair holding it, else *symbol*."""
    for a, b in pairs:
        if symbol == a:
            return b
        if symbol == b:
            return a
    return symbol


def normalise_pairs(pairs: Sequence[str | Sequence[str]]) -> tuple[Pair, ...]:
    """Upper-case and validate plugboard pairs ("AB" or ("A", "B"))."""
    used: set[str] = set()
    out: list[Pair] = []

    for raw in pairs:
        if not isinstance(raw, (str, list, tuple)):
            raise ValueError(f"Pair {raw!r} must be a 2-letter string")
        if len(raw) != 2:
            raise ValueError(f"Pair {raw!r} must be exactly 2 symbols")
        a, b = (str(ch).upper() for ch in raw)

        if not is_letter(a) or not is_letter(b):
            bad = a if not is_letter(a) else b
            raise ValueError(f"Symbol {bad!r} not in alphabet")
        if a == b:
            raise ValueError(f"Plugboard cannot map a symbol to itself: {a}")
        if a in used or b in used:
            dup = a if a in used else b
            raise ValueError(f"Character {dup!r} already used in plugboard")

        out.append((a, b))
        used.update((a, b))

    return tuple(out)


class Plugboard:
    def __init__(self, pairs: Sequence[str | Sequence[str]] = ()) -> None:
        self.pairs: tuple[Pair, ...] = normalise_pairs(pairs)

    def swap(self, symbol: str) -> str:
        mapped = plugboard_swap(symbol, self.pairs)
        debug.log("plugboard", f"{symbol}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
