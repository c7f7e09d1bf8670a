# enigma.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from alphabet import index_of, is_letter, mod
from debug import Debug
from plugboard import Plugboard
from rotor_and_reflector import REFLECTOR, ROTOR_COUNT, ROTORS, Reflector, Rotor, rotor_index

debug = Debug()


class Enigma:
    """Three-rotor Enigma with plugboard and the fixed UKW-B reflector.

    Rotors, positions and ring settings are given left to right. The only
    state that changes while enciphering is each rotor's position.
    """

    def __init__(
        self,
        rotors: Sequence[int | str],
        positions: Sequence[int],
        ring_settings: Sequence[int],
        plugboard_pairs: Sequence[str | Sequence[str]],
    ) -> None:
        if len(rotors) != ROTOR_COUNT:
            raise ValueError(f"Need exactly {ROTOR_COUNT} rotors, got {len(rotors)}")
        if len(positions) != len(rotors):
            raise ValueError("positions length mismatch")
        if len(ring_settings) != len(rotors):
            raise ValueError("ring_settings length mismatch")

        self.rotors: list[Rotor] = [
            Rotor.from_spec(ROTORS[rotor_index(label)], ring, pos)
            for label, pos, ring in zip(rotors, positions, ring_settings)
        ]
        self.plugboard = Plugboard(plugboard_pairs)
        self.plugboard_pairs = self.plugboard.pairs
        self.reflector = Reflector.from_spec(REFLECTOR)

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        """Letters visible in the three windows, left to right."""
        return "".join(r.window for r in self.rotors)

    def set_positions(self, positions: Sequence[int | str]) -> None:
        """Turn each rotor to a position given as number or window letter."""
        if len(positions) != len(self.rotors):
            raise ValueError("positions length mismatch")
        for rotor, pos in zip(self.rotors, positions):
            if isinstance(pos, str):
                pos = index_of(pos.upper())
            rotor.position = mod(pos)

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance the rotors for one key press (with the double step)."""
        left, middle, right = self.rotors

        # both flags come from the state before this key press
        right_at_notch = right.at_notch()
        middle_at_notch = middle.at_notch()

        if middle_at_notch:
            left.step()
            middle.step()
        elif right_at_notch:
            middle.step()
        right.step()

        debug.log("stepping", f"Rotor pos {list(self.positions)} window={self.window}")

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, symbol: str) -> str:
        if not is_letter(symbol):
            return symbol
        letter = symbol.upper()

        self.step_rotors()
        left, middle, right = self.rotors

        signal = self.plugboard.swap(letter)
        signal = right.forward(signal)
        signal = middle.forward(signal)
        signal = left.forward(signal)

        signal = self.reflector.reflect(signal)

        signal = left.backward(signal)
        signal = middle.backward(signal)
        signal = right.backward(signal)

        out_ch = self.plugboard.swap(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def process(self, text: str) -> str:
        # letters are upper-cased one at a time
        return "".join(self.encrypt_char(ch) for ch in text)

    def __repr__(self) -> str:
        pairs = " ".join(a + b for a, b in self.plugboard_pairs)
        return f"<Enigma window={self.window} plugs=[{pairs}]>"
