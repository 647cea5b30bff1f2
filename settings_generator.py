# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List, Sequence

from alphabet import ALPHABET
from errors import ConfigurationError
from keyboard_and_plugboard import MAX_PAIRS
from machine_settings import MachineSettings, save_config
from utilities import REFLECTORS, ROTOR_COUNT, ROTOR_ORDER

DEFAULT_PAIRS = 10
DEFAULT_OUTFILE = Path("enigma_config.json")

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, len(alpha) // 2))
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def random_settings(
    rng: Random | SystemRandom,
    *,
    n_pairs: int = DEFAULT_PAIRS,
    rotor_pool: Sequence[str] = ROTOR_ORDER,
    reflectors: Sequence[str] = tuple(REFLECTORS),
) -> MachineSettings:
    """A valid key-sheet: distinct rotors, random windows, rings and plugs."""
    if not 0 <= n_pairs <= MAX_PAIRS:
        raise ConfigurationError(f"Plug pair count must be 0–{MAX_PAIRS}, got {n_pairs}")

    return MachineSettings(
        rotors=tuple(rng.sample(list(rotor_pool), ROTOR_COUNT)),
        positions=tuple(rng.randrange(len(ALPHABET)) for _ in range(ROTOR_COUNT)),
        ring_settings=tuple(rng.randrange(len(ALPHABET)) for _ in range(ROTOR_COUNT)),
        plugs=tuple(choose_pairs(ALPHABET, n_pairs, rng)),
        reflector=rng.choice(list(reflectors)),
    )


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma key-sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=DEFAULT_PAIRS,
        help=f"Number of plugboard pairs 0–{MAX_PAIRS} (default: {DEFAULT_PAIRS})",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=DEFAULT_OUTFILE,
        help=f"Destination JSON file (default: {DEFAULT_OUTFILE})",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_cli(argv)
    rng = build_rng(args.seed)

    try:
        cfg = random_settings(rng, n_pairs=args.pairs)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        save_config(cfg, args.outfile)
    except OSError as exc:
        print(f"error: cannot write {args.outfile}: {exc}", file=sys.stderr)
        return 2

    window = "".join(ALPHABET[p] for p in cfg.positions)
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {list(cfg.rotors)}\n"
        f"   reflector   : {cfg.reflector}\n"
        f"   window      : {window}\n"
        f"   plug pairs  : {len(cfg.plugs)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
