# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

from alphabet import index_of, is_letter
from debug import Debug
from enigma import Enigma
from plugboard import normalise_pairs
from rotor_and_reflector import ROTOR_COUNT, ROTORS, rotor_index

debug = Debug()

REQUIRED_KEYS = {"rotors", "positions", "rings", "plugs"}


def parse_setting(value: int | str) -> int:
    """Accept 0-based numbers or window letters ("A" == 0)."""
    if isinstance(value, str):
        value = value.strip()
        if value.lstrip("-").isdigit():
            return int(value)
        if is_letter(value):
            return index_of(value.upper())
        raise ValueError(f"Expected a number or a letter, got {value!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected a number or a letter, got {value!r}")
    return value


def _as_list(label: str, value, *, letters: bool = False) -> list:
    """A JSON array (or, with *letters*, a string such as "ADU") as a list."""
    if letters and isinstance(value, str):
        return list(value)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{label} must be a list, got {value!r}")
    return list(value)


@dataclass(slots=True)
class MachineSettings:
    """A key sheet entry: everything needed to build an identical machine."""

    rotors: List[str] = field(default_factory=lambda: ["I", "II", "III"])
    positions: List[int] = field(default_factory=lambda: [0, 0, 0])
    rings: List[int] = field(default_factory=lambda: [0, 0, 0])
    plugs: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.rotors = [ROTORS[rotor_index(r)].name for r in _as_list("rotors", self.rotors)]
        self.positions = [parse_setting(p) for p in _as_list("positions", self.positions, letters=True)]
        self.rings = [parse_setting(r) for r in _as_list("rings", self.rings, letters=True)]
        self.plugs = [a + b for a, b in normalise_pairs(_as_list("plugs", self.plugs))]

        for label, values in (("rotors", self.rotors), ("positions", self.positions), ("rings", self.rings)):
            if len(values) != ROTOR_COUNT:
                raise ValueError(f"{label} needs exactly {ROTOR_COUNT} entries, got {len(values)}")
        if len(set(self.rotors)) != len(self.rotors):
            raise ValueError(f"Rotors must be distinct, got {self.rotors}")

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
        return cls(
            rotors=data["rotors"],
            positions=data["positions"],
            rings=data["rings"],
            plugs=data["plugs"],
        )

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: str | Path) -> MachineSettings:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    settings = MachineSettings.from_dict(data)
    debug.log("config", f"loaded {path}: {settings}")
    return settings


def save_config(settings: MachineSettings, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    debug.log("config", f"wrote {path}")
    return path


def build_machine(settings: MachineSettings) -> Enigma:
    """Return a fresh machine set to the key's start positions."""
    return Enigma(settings.rotors, settings.positions, settings.rings, settings.plugs)
