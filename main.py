# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from debug import Debug
from enigma import Enigma
from errors import ConfigurationError
from machine_settings import MachineSettings, load_config
from utilities import DEFAULT_REFLECTOR, REFLECTORS, group_blocks

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


@dataclass(slots=True)
class Config:
    """Runtime switches that influence what the CLI prints."""

    verify: bool = False            # decrypt with a twin machine as well
    block: int = 0                  # display block size, 0 keeps the text as is


# ────────────────────────────────────────────────────────────────────────
#  1. Building the machine
# ────────────────────────────────────────────────────────────────────────


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    """Key-sheet from ``--config`` or from the individual flags."""
    if args.config:
        return load_config(args.config)

    return MachineSettings.from_dict(
        {
            "rotors": args.rotors,
            "positions": args.positions,
            "ring_settings": args.rings,
            "plugs": args.plugs,
            "reflector": args.reflector,
        }
    )


# ────────────────────────────────────────────────────────────────────────
#  2. CipherSession – one key-sheet, fresh machines per message
# ────────────────────────────────────────────────────────────────────────


class CipherSession:
    """Process messages from the key-sheet's start positions."""

    def __init__(self, settings: MachineSettings, cfg: Config) -> None:
        self.settings = settings
        self.cfg = cfg
        self.machine = Enigma.from_settings(settings)

    def run(self, msg: str) -> tuple[str, str | None]:
        """Return `(output, decrypted)`; decrypted is None unless verifying."""
        self.machine.reset()
        out = self.machine.process(msg)

        decrypted = None
        if self.cfg.verify:
            # a twin machine, never the one that just encrypted
            decrypted = Enigma.from_settings(self.settings).process(out)
        return out, decrypted

    def show(self, text: str) -> str:
        return group_blocks(text, self.cfg.block) if self.cfg.block else text


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", type=Path, help="Load machine settings from a JSON key-sheet instead of the flags below.")
    p.add_argument("--rotors", default="I II III", help='Rotor order left to right (default: "I II III")')
    p.add_argument("--positions", default="AAA", help="Start positions as letters (AAA) or numbers (0 0 0)")
    p.add_argument("--rings", default="AAA", help="Ring settings as letters (AAA) or numbers (0 0 0)")
    p.add_argument("--plugs", default="", help='Plugboard pairs, e.g. "AB CD"')
    p.add_argument("--reflector", default=DEFAULT_REFLECTOR, choices=sorted(REFLECTORS), help=f"Reflector (default: {DEFAULT_REFLECTOR})")
    p.add_argument("--verify", action="store_true", help="Also decrypt the output with an identically configured machine.")
    p.add_argument("--group", type=int, default=0, metavar="N", help="Print letters only, in blocks of N.")
    p.add_argument("--debug", nargs="+", default=[], metavar="COMPONENT", help="Enable debug logging for components (e.g. stepping plugboard).")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        debug.enable(*args.debug)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        settings = settings_from_args(args)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    cfg = Config(verify=args.verify, block=max(args.group, 0))
    session = CipherSession(settings, cfg)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        out, decrypted = session.run(args.message)
        print("Output:", session.show(out))
        if decrypted is not None:
            print("Decrypted:", decrypted)
        return 0

    # interactive REPL ---------------------------------------------------
    print(f"\nLoaded {session.machine!r}.")
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("\nMessage: ")
        except EOFError:
            break
        if not txt.strip():
            break
        out, decrypted = session.run(txt)
        print("\nOutput:", session.show(out))
        if decrypted is not None:
            print("\nDecrypted:", decrypted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
