# utilities.py
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Dict, List

from alphabet import ALPHABET, SIZE
from errors import ConfigurationError
from rotor_and_reflector import Reflector, RotorSpec

# ────────────────────────────────────────────────────────────────────────
#  0. Regex & trivial helpers
# ────────────────────────────────────────────────────────────────────────

_num_re = re.compile(r"^\d+$")
ROTOR_COUNT = 3
DEFAULT_REFLECTOR = "A"


# ────────────────────────────────────────────────────────────────────────
#  1. Wheel database
# ────────────────────────────────────────────────────────────────────────

# Enigma I / M3 rotors ---------------------------------------------------
I   = RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", notch="Q")
II  = RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", notch="E")
III = RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", notch="V")
IV  = RotorSpec("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", notch="J")
V   = RotorSpec("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", notch="Z")

# Reflectors (Umkehrwalzen) ----------------------------------------------
A = Reflector("EJMZALYXVBWFCRQUONTSPIKHGD", name="A")
B = Reflector("YRUHQSLDPXNGOKMIEBFZCWVJAT", name="B")
C = Reflector("FVPJIAOYEDRZXWGCTKUQSBNMHL", name="C")

ROTOR_ORDER: List[str] = ["I", "II", "III", "IV", "V"]

ROTORS: Dict[str, RotorSpec] = {"I": I, "II": II, "III": III, "IV": IV, "V": V}
REFLECTORS: Dict[str, Reflector] = {"A": A, "B": B, "C": C}


# ────────────────────────────────────────────────────────────────────────
#  2. Identifier resolution
# ────────────────────────────────────────────────────────────────────────


def resolve_rotor(ident: str | int) -> RotorSpec:
    """Map ``"III"`` / ``"iii"`` / ``2`` to the rotor spec it names."""
    if isinstance(ident, bool):
        raise ConfigurationError(f"Invalid rotor identifier {ident!r}")
    if isinstance(ident, int):
        if 0 <= ident < len(ROTOR_ORDER):
            return ROTORS[ROTOR_ORDER[ident]]
        raise ConfigurationError(
            f"Rotor index {ident} out of range 0–{len(ROTOR_ORDER) - 1}"
        )
    if isinstance(ident, str) and ident.strip().upper() in ROTORS:
        return ROTORS[ident.strip().upper()]
    raise ConfigurationError(
        f"Unknown rotor {ident!r}. Expected one of {ROTOR_ORDER} or an index"
    )


def resolve_reflector(ident: str | Reflector) -> Reflector:
    if isinstance(ident, Reflector):
        return ident
    if isinstance(ident, str) and ident.strip().upper() in REFLECTORS:
        return REFLECTORS[ident.strip().upper()]
    raise ConfigurationError(
        f"Unknown reflector {ident!r}. Expected one of {sorted(REFLECTORS)}"
    )


# ────────────────────────────────────────────────────────────────────────
#  3. Setting parsers (CLI & key-sheet input)
# ────────────────────────────────────────────────────────────────────────


def parse_settings(raw: str | Sequence, what: str, count: int = ROTOR_COUNT) -> List[int]:
    """Accept ``"AQV"``, ``"0 16 21"``, ``[0, 16, 21]`` or ``["A", "Q", "V"]``.

    Range checking is left to the rotor; only the shape is checked here.
    """
    if isinstance(raw, str):
        text = raw.strip().upper()
        tokens = text.split()
        if len(tokens) == count and all(_num_re.match(t) for t in tokens):
            values: list = [int(t) for t in tokens]
        elif len(tokens) == 1 and len(text) == count and set(text) <= set(ALPHABET):
            values = [ALPHABET.index(ch) for ch in text]
        elif len(tokens) == count and all(len(t) == 1 and t in ALPHABET for t in tokens):
            values = [ALPHABET.index(t) for t in tokens]
        else:
            raise ConfigurationError(
                f"{what} {raw!r}: expected {count} letters or {count} numbers 0–{SIZE - 1}"
            )
    else:
        values = [
            ALPHABET.index(v.upper()) if isinstance(v, str) and len(v) == 1 and v.upper() in ALPHABET else v
            for v in _as_list(raw, what)
        ]

    if len(values) != count:
        raise ConfigurationError(f"{what}: need exactly {count} values, got {len(values)}")
    return values


def _as_list(raw, what: str) -> List:
    try:
        return list(raw)
    except TypeError:
        raise ConfigurationError(f"{what} must be a sequence, got {raw!r}")


def parse_pairs(raw: str | Sequence) -> List:
    """``"AB cd"`` → ``["AB", "CD"]``; sequences pass through untouched."""
    if isinstance(raw, str):
        return [p.upper() for p in raw.split()]
    return _as_list(raw, "Plugboard pairs")


def parse_rotors(raw: str | Sequence) -> List:
    """``"I II III"`` → ``["I", "II", "III"]``; sequences pass through."""
    if isinstance(raw, str):
        return raw.upper().split()
    return _as_list(raw, "Rotors")


def group_blocks(text: str, block: int) -> str:
    """Display helper: letters only, in blocks of *block* separated by spaces."""
    letters = "".join(ch for ch in text if ch in ALPHABET)
    if block <= 0:
        return letters
    return " ".join(letters[i : i + block] for i in range(0, len(letters), block))


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "ROTOR_ORDER",
    "DEFAULT_REFLECTOR",
    "resolve_rotor",
    "resolve_reflector",
    "parse_settings",
    "parse_pairs",
    "parse_rotors",
    "group_blocks",
]
