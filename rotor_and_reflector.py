# rotor_and_reflector.py
from __future__ import annotations

from dataclasses import dataclass, field

from alphabet import ALPHABET, SIZE, mod
from debug import Debug
from errors import ConfigurationError

debug = Debug()


def _check_setting(value, what: str) -> int:
    # bool is an int subclass; True/False are never a valid position
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{what} must be an integer 0–{SIZE - 1}, got {value!r}")
    if not 0 <= value < SIZE:
        raise ConfigurationError(f"{what} {value} out of range 0–{SIZE - 1}")
    return value


@dataclass(frozen=True, slots=True)
class RotorSpec:
    """Immutable wiring of one historical wheel type."""

    name: str
    wiring: str
    notch: str
    forward_map: tuple[int, ...] = field(init=False, repr=False, compare=False)
    inverse_map: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ConfigurationError(f"Rotor {self.name}: wiring must be a permutation of A-Z")
        if len(self.notch) != 1 or self.notch not in ALPHABET:
            raise ConfigurationError(f"Rotor {self.name}: notch must be one letter A-Z")

        # integer lookup tables (frozen, so bypass __setattr__)
        object.__setattr__(self, "forward_map", tuple(ALPHABET.index(c) for c in self.wiring))
        object.__setattr__(self, "inverse_map", tuple(self.wiring.index(c) for c in ALPHABET))

    @property
    def notch_index(self) -> int:
        return ALPHABET.index(self.notch)


class Rotor:
    def __init__(self, spec: RotorSpec, ring_setting: int = 0, position: int = 0) -> None:
        self.spec = spec
        self.ring_setting = _check_setting(ring_setting, "Ring setting")
        self.position = _check_setting(position, "Position")

    # ── notch helpers ─────────────────────────────────────────────
    @property
    def window(self) -> str:
        """Letter currently showing in the rotor window."""
        return ALPHABET[self.position]

    def at_notch(self) -> bool:
        return self.position == self.spec.notch_index

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = mod(self.position + 1)
        debug.log("rotor", f"{self.spec.name} -> pos {self.position}")

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        offset = self.position - self.ring_setting
        mapped = self.spec.forward_map[mod(sig + offset)]
        return mod(mapped - offset)

    def backward(self, sig: int) -> int:
        offset = self.position - self.ring_setting
        mapped = self.spec.inverse_map[mod(sig + offset)]
        return mod(mapped - offset)

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.spec.name} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, wiring: str, name: str = "") -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError(f"Reflector {name}: wiring must be a permutation of A-Z")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = ALPHABET.index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ConfigurationError(
                    f"Reflector {name}: wiring must be an involution with no fixed points"
                )

        self.name = name
        self.wiring = wiring
        self._map = tuple(ALPHABET.index(c) for c in wiring)

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{sig}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
