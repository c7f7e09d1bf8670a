# settings_generator.py
from __future__ import annotations

import argparse
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from alphabet import ALPHABET, SIZE
from plugboard import MAX_PAIRS
from rotor_and_reflector import ROTOR_COUNT, ROTORS
from settings import MachineSettings, save_config

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(rng: Random | SystemRandom, pairs: int = 10) -> MachineSettings:
    """One random key: three distinct rotors, positions, rings and plugs."""
    rotors = rng.sample([spec.name for spec in ROTORS], ROTOR_COUNT)
    return MachineSettings(
        rotors=rotors,
        positions=[rng.randrange(SIZE) for _ in rotors],
        rings=[rng.randrange(SIZE) for _ in rotors],
        plugs=choose_pairs(pairs, rng),
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma daily key")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--pairs", type=int, default=10, help=f"Plugboard pairs, 0-{MAX_PAIRS} (default: 10)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    settings = generate_settings(build_rng(args.seed), args.pairs)
    save_config(settings, args.outfile)

    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {settings.rotors}\n"
        f"   positions   : {settings.positions}\n"
        f"   rings       : {settings.rings}\n"
        f"   plug pairs  : {len(settings.plugs)}")


if __name__ == "__main__":
    main()
