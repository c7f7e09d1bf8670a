# rotor_and_reflector.py
from __future__ import annotations

from dataclasses import dataclass

from alphabet import ALPHABET, index_of, is_letter, mod
from debug import Debug

debug = Debug()


# ── wheel specs (static wiring tables) ────────────────────────────
@dataclass(frozen=True)
class RotorSpec:
    name: str
    wiring: str
    notch: str

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ValueError(f"Rotor {self.name}: wiring must be a permutation of alphabet")
        if len(self.notch) != 1 or not is_letter(self.notch):
            raise ValueError(f"Rotor {self.name}: notch must be a single letter, got {self.notch!r}")


@dataclass(frozen=True)
class ReflectorSpec:
    name: str
    wiring: str

    def __post_init__(self) -> None:
        _check_reflector(self.wiring, self.name)


def _check_reflector(wiring: str, name: str) -> None:
    if len(wiring) != len(ALPHABET):
        raise ValueError("Reflector wiring length must match alphabet length")

    # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
    for i, c in enumerate(wiring):
        j = index_of(c)
        if wiring[j] != ALPHABET[i] or i == j:
            raise ValueError(f"Reflector {name}: wiring must be an involution with no fixed points")


# Wehrmacht / Luftwaffe rotors, index 0 = I
ROTORS: tuple[RotorSpec, ...] = (
    RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    RotorSpec("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    RotorSpec("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
)

REFLECTORS: dict[str, ReflectorSpec] = {
    "A": ReflectorSpec("A", "EJMZALYXVBWFCRQUONTSPIKHGD"),
    "B": ReflectorSpec("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C": ReflectorSpec("C", "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
}

REFLECTOR = REFLECTORS["B"]

ROTOR_COUNT = 3


def rotor_index(label: str | int) -> int:
    """Catalog index for a rotor given by index or by name (I, ii, 3 ...)."""
    if isinstance(label, bool) or not isinstance(label, (int, str)):
        raise ValueError(f"Rotor must be a name or an index, got {label!r}")
    if isinstance(label, int):
        if not 0 <= label < len(ROTORS):
            raise IndexError(f"Rotor index {label} outside catalog 0-{len(ROTORS) - 1}")
        return label
    name = label.strip().upper()
    if name.isdigit():
        return rotor_index(int(name))
    for i, spec in enumerate(ROTORS):
        if spec.name == name:
            return i
    raise ValueError(f"Unknown rotor {label!r}. Expected one of {[s.name for s in ROTORS]}")


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        ring_setting: int = 0,
        position: int = 0,
    ) -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ValueError("wiring must be a permutation of alphabet")
        if len(notch) != 1 or not is_letter(notch):
            raise ValueError(f"Notch must be a single letter, got {notch!r}")

        self.wiring = wiring
        self.notch = notch
        self.ring_setting = mod(ring_setting)
        self.position = mod(position)

    @classmethod
    def from_spec(cls, spec: RotorSpec, ring_setting: int = 0, position: int = 0) -> "Rotor":
        return cls(spec.wiring, spec.notch, ring_setting, position)

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = mod(self.position + 1)

    def at_notch(self) -> bool:
        # the notch is cut into the wheel body, so the ring does not move it
        return self.position == index_of(self.notch)

    # ── signal paths ---------------------------------------------
    def forward(self, symbol: str) -> str:
        offset = self.position - self.ring_setting
        shifted = mod(index_of(symbol) + offset)
        wired = self.wiring[shifted]
        out = ALPHABET[mod(index_of(wired) - offset)]
        debug.log("rotor", f"fwd {symbol}->{out} pos={self.position} ring={self.ring_setting}")
        return out

    def backward(self, symbol: str) -> str:
        offset = self.position - self.ring_setting
        shifted = mod(index_of(symbol) + offset)
        wired = self.wiring.index(ALPHABET[shifted])
        out = ALPHABET[mod(wired - offset)]
        debug.log("rotor", f"bwd {symbol}->{out} pos={self.position} ring={self.ring_setting}")
        return out

    # ── niceties --------------------------------------------------
    @property
    def window(self) -> str:
        """Letter shown in the machine's window."""
        return ALPHABET[self.position]

    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        _check_reflector(wiring, "custom")
        self.wiring = wiring

    @classmethod
    def from_spec(cls, spec: ReflectorSpec) -> "Reflector":
        return cls(spec.wiring)

    def reflect(self, symbol: str) -> str:
        out = self.wiring[index_of(symbol)]
        debug.log("reflector", f"{symbol}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
