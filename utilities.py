# utilities.py
from __future__ import annotations

from typing import List, Sequence

from alphabet import SIZE
from plugboard import MAX_PAIRS, normalise_pairs
from rotor_and_reflector import ROTOR_COUNT, ROTORS, rotor_index
from settings import MachineSettings, parse_setting


def ask(prompt: str) -> str:
    """Read & normalise an operator’s response (uppercase, trimmed)."""
    return input(prompt).strip().upper()


# ────────────────────────────────────────────────────────────────────────
#  0. Parsers shared by the prompts and the command line
# ────────────────────────────────────────────────────────────────────────


def parse_rotors(tokens: Sequence[str]) -> List[str]:
    if len(tokens) != ROTOR_COUNT:
        raise ValueError(f"Need exactly {ROTOR_COUNT} rotors, got {len(tokens)}")
    names = [ROTORS[rotor_index(t)].name for t in tokens]
    if len(set(names)) != len(names):
        raise ValueError(f"Rotors must be distinct, got {' '.join(names)}")
    return names


def parse_int_triple(tokens: Sequence[str]) -> List[int]:
    """Three settings as 0-based numbers or letters ("A B C" == "0 1 2")."""
    if len(tokens) == 1 and len(tokens[0]) == ROTOR_COUNT and tokens[0].isalpha():
        tokens = list(tokens[0])  # "ADU" shorthand
    if len(tokens) != ROTOR_COUNT:
        raise ValueError(f"Need exactly {ROTOR_COUNT} values, got {len(tokens)}")
    return [parse_setting(t) for t in tokens]


def parse_plugs(tokens: Sequence[str]) -> List[str]:
    if len(tokens) > MAX_PAIRS:
        raise ValueError(f"Too many pairs (max {MAX_PAIRS}).")
    return [a + b for a, b in normalise_pairs(tokens)]


def group_blocks(text: str, block: int) -> str:
    """Split *text* into space-separated groups of *block* symbols."""
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  1. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def _ask_until_valid(prompt: str, parse, *, allow_empty: bool = False):
    while True:
        raw = ask(prompt)
        if not raw and not allow_empty:
            print("❌  An answer is required.")
            continue
        try:
            return parse(raw.split())
        except (ValueError, IndexError) as exc:
            print(f"❌  {exc}")


def get_rotor_selection() -> List[str]:
    names = [spec.name for spec in ROTORS]
    print("\nAvailable Rotors:", " ".join(names))
    return _ask_until_valid(f"Select {ROTOR_COUNT} rotors, left to right: ", parse_rotors)


def get_positions() -> List[int]:
    return _ask_until_valid(f"Start positions (0-{SIZE - 1} or letters): ", parse_int_triple)


def get_ring_settings() -> List[int]:
    return _ask_until_valid(f"Ring settings (0-{SIZE - 1} or letters): ", parse_int_triple)


def get_plugboard() -> List[str]:
    """Return a list of *validated* plugboard pairs (e.g. ["AB", "CD"])."""
    print(f"\nPlugboard pairs (≤{MAX_PAIRS}, e.g. AB CD EF):")
    return _ask_until_valid("Pairs (Enter for none): ", parse_plugs, allow_empty=True)


def get_settings() -> MachineSettings:
    """Collect *interactive* settings from the operator."""
    rotors = get_rotor_selection()
    positions = get_positions()
    rings = get_ring_settings()
    plugs = get_plugboard()
    return MachineSettings(rotors=rotors, positions=positions, rings=rings, plugs=plugs)
