# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Sequence

from alphabet import ALPHABET, to_index, to_letter
from debug import Debug
from errors import ConfigurationError

debug = Debug()

MAX_PAIRS = len(ALPHABET) // 2

Pair = str | Sequence[str]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    # letter → integer signal
    def forward(self, letter: str) -> int:
        signal = to_index(letter)
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(ALPHABET)):
            raise ValueError(f"Signal {signal} out of range 0–{len(ALPHABET) - 1}")
        return to_letter(signal)


# ── free swap function ────────────────────────────────────────────
def swap(letter: str, pairs: Sequence[Pair]) -> str:
    """Return the partner of *letter* in *pairs*, or *letter* itself.

    No validation happens here. If a letter occurs in more than one pair the
    first pair that contains it wins.
    """
    for a, b in pairs:
        if letter == a:
            return b
        if letter == b:
            return a
    return letter


def normalise_pair(raw: Pair) -> tuple[str, str]:
    """Turn ``"ab"`` or ``("a", "b")`` into ``("A", "B")``."""
    if isinstance(raw, str):
        symbols = list(raw.strip())
    else:
        try:
            symbols = list(raw)
        except TypeError:
            raise ConfigurationError(f"Pair {raw!r} must be two letters")
    if len(symbols) != 2 or not all(isinstance(s, str) and len(s) == 1 for s in symbols):
        raise ConfigurationError(f"Pair {raw!r} must be exactly 2 letters")
    a, b = (s.upper() for s in symbols)
    return a, b


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(self, pairs: Sequence[Pair] = ()) -> None:
        if isinstance(pairs, str):
            raise ConfigurationError(
                f"Plugboard pairs must be a sequence of pairs, not {pairs!r}"
            )
        pairs = list(pairs)
        if len(pairs) > MAX_PAIRS:
            raise ConfigurationError(
                f"Too many plugboard pairs ({len(pairs)}, max {MAX_PAIRS})"
            )

        self.mapping: dict[str, str] = {ch: ch for ch in ALPHABET}
        self._pairs: list[tuple[str, str]] = []
        used: set[str] = set()

        for raw in pairs:
            a, b = normalise_pair(raw)

            if a not in self.mapping or b not in self.mapping:
                bad = a if a not in self.mapping else b
                raise ConfigurationError(f"Symbol {bad!r} not in alphabet A-Z")
            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a letter to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Letter {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[a], self.mapping[b] = b, a
            self._pairs.append((a, b))
            used.update((a, b))

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._pairs)

    def swap(self, letter: str) -> str:
        return self.mapping.get(letter, letter)

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        letter = to_letter(signal)
        mapped = self.mapping[letter]
        debug.log("plugboard", f"{signal}->{letter}->{mapped}")
        return to_index(mapped)

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self._pairs]
        return f"<Plugboard {' '.join(swaps)}>"
