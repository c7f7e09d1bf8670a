# main.py
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List

from debug import COMPONENTS, Debug
from settings import MachineSettings, build_machine, load_config, save_config
from utilities import (
    get_plugboard,
    get_positions,
    get_ring_settings,
    get_rotor_selection,
    get_settings,
    group_blocks,
    parse_int_triple,
    parse_plugs,
    parse_rotors,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches that only affect how results are shown."""

    group: bool = True              # print ciphertext in blocks
    block: int = 5                  # display block size


# ────────────────────────────────────────────────────────────────────────
#  1. Settings resolution
# ────────────────────────────────────────────────────────────────────────


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    """Build settings from the command line, prompting for any part not given."""
    return MachineSettings(
        rotors=parse_rotors(args.rotors) if args.rotors is not None else get_rotor_selection(),
        positions=parse_int_triple(args.positions) if args.positions is not None else get_positions(),
        rings=parse_int_triple(args.rings) if args.rings is not None else get_ring_settings(),
        plugs=parse_plugs(args.plugs) if args.plugs is not None else get_plugboard(),
    )


def resolve_settings(args: argparse.Namespace) -> MachineSettings:
    if args.interactive:
        return get_settings()
    if args.config:
        return load_config(args.config)
    return settings_from_args(args)


# ────────────────────────────────────────────────────────────────────────
#  2. Enciphering helpers
# ────────────────────────────────────────────────────────────────────────


def encipher(settings: MachineSettings, text: str) -> str:
    """Encipher *text* on a fresh machine set to the key's start positions."""
    return build_machine(settings).process(text)


def render(cipher: str, cfg: Config) -> str:
    # only letter-only output is regrouped; anything else keeps its layout
    if cfg.group and cipher.isalpha():
        return group_blocks(cipher, cfg.block)
    return cipher


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive REPL starts.")
    p.add_argument("--rotors", nargs="+", metavar="ROTOR", help="Three rotors left to right, by name (I-V) or index (0-4).")
    p.add_argument("--positions", nargs="+", metavar="POS", help="Start positions, numbers 0-25 or letters (e.g. A D U or ADU).")
    p.add_argument("--rings", nargs="+", metavar="RING", help="Ring settings, numbers 0-25 or letters.")
    p.add_argument("--plugs", nargs="*", metavar="PAIR", help="Plugboard pairs, e.g. AB CD EF.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of answering prompts.")
    p.add_argument("--save", metavar="FILE", help="Write the settings in use to a JSON key sheet.")
    p.add_argument("--interactive", action="store_true", help="Ignore other settings and run the interactive prompt chain.")
    p.add_argument("--group", choices=["on", "off"], default="on", help="Print letter-only output in blocks of five. Default: on")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="CHANNEL",
                   help=f"Enable debug logging for: {', '.join(COMPONENTS)}")
    return p


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    if args.debug:
        debug.enable(*args.debug)

    try:
        settings = resolve_settings(args)
    except (ValueError, IndexError, KeyError, OSError) as exc:
        raise SystemExit(f"Failed to load configuration: {exc}")

    if args.save:
        print(f"✅  Wrote {save_config(settings, Path(args.save))}")

    cfg = Config(group=(args.group == "on"))

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(render(encipher(settings, args.message), cfg))
        return

    # interactive REPL ---------------------------------------------------
    print(f"\nRotors {' '.join(settings.rotors)}, positions {settings.positions}, "
          f"rings {settings.rings}, plugs {' '.join(settings.plugs) or '-'}")
    print("Type blank line to quit.\n")
    while True:
        txt = input("Message > ")
        if not txt.strip():
            break
        print(render(encipher(settings, txt), cfg))


if __name__ == "__main__":
    main()
