# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from alphabet import is_letter
from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Pair, Plugboard
from rotor_and_reflector import Reflector, Rotor
from utilities import (
    DEFAULT_REFLECTOR,
    REFLECTORS,
    ROTOR_COUNT,
    parse_pairs,
    parse_rotors,
    parse_settings,
    resolve_reflector,
    resolve_rotor,
)

if TYPE_CHECKING:
    from machine_settings import MachineSettings

debug = Debug()


class Enigma:
    """Three-rotor machine: left, middle, right (right nearest the keyboard).

    Every instance builds its own rotors from the immutable wheel specs, so
    two machines never share mutable state. Encryption and decryption are
    the same operation; use two identically configured machines for the two
    roles.
    """

    def __init__(
        self,
        rotors: Sequence[str | int],
        positions: Sequence[int],
        ring_settings: Sequence[int],
        plugboard_pairs: Sequence[Pair] = (),
        *,
        reflector: str | Reflector = DEFAULT_REFLECTOR,
    ) -> None:
        rotor_ids = parse_rotors(rotors)
        if len(rotor_ids) != ROTOR_COUNT:
            raise ConfigurationError(
                f"Need exactly {ROTOR_COUNT} rotors, got {len(rotor_ids)}"
            )
        positions = parse_settings(positions, "Positions")
        ring_settings = parse_settings(ring_settings, "Ring settings")

        specs = [resolve_rotor(ident) for ident in rotor_ids]
        self.rotors: tuple[Rotor, ...] = tuple(
            Rotor(spec, ring, pos)
            for spec, ring, pos in zip(specs, ring_settings, positions)
        )
        self.kb = Keyboard()
        self.pb = Plugboard(parse_pairs(plugboard_pairs))
        self.reflector = resolve_reflector(reflector)

        self._rotor_ids = tuple(spec.name for spec in specs)
        self._initial = tuple(positions)

        debug.log(
            "config",
            f"rotors={self._rotor_ids} pos={self._initial} "
            f"rings={tuple(ring_settings)} {self.pb!r} {self.reflector!r}",
        )

    @classmethod
    def from_settings(cls, settings: MachineSettings) -> "Enigma":
        """Build a fresh machine from a key-sheet."""
        return cls(
            settings.rotors,
            settings.positions,
            settings.ring_settings,
            settings.plugs,
            reflector=settings.reflector,
        )

    # ── state inspection & reset ────────────────────────────────

    @property
    def rotor_positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        """The three letters showing in the rotor windows."""
        return "".join(r.window for r in self.rotors)

    @property
    def settings(self) -> MachineSettings:
        """Key-sheet that rebuilds this machine at its initial positions."""
        from machine_settings import MachineSettings

        return MachineSettings(
            rotors=self._rotor_ids,
            positions=self._initial,
            ring_settings=tuple(r.ring_setting for r in self.rotors),
            plugs=tuple(a + b for a, b in self.pb.pairs),
            reflector=(
                self.reflector.name
                if REFLECTORS.get(self.reflector.name) is self.reflector
                else self.reflector
            ),
        )

    def reset(self, positions: Sequence[int] | None = None) -> None:
        """Rewind to the initial positions, or re-seed with new ones."""
        if positions is not None:
            fresh = [
                Rotor(r.spec, r.ring_setting, pos)
                for r, pos in zip(self.rotors, parse_settings(positions, "Positions"))
            ]
            self._initial = tuple(r.position for r in fresh)
        for rotor, pos in zip(self.rotors, self._initial):
            rotor.position = pos

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors for one key-press."""
        left, middle, right = self.rotors

        carry = right.at_notch()
        right.step()
        if carry:
            middle.step()
        if middle.at_notch():
            left.step()

        debug.log("stepping", f"Rotor pos {list(self.rotor_positions)}")

    # ── encipher one letter  ────────────────────────────────────

    def encipher(self, letter: str) -> str:
        if not is_letter(letter):
            raise ValueError(f"Cannot encipher {letter!r}: not a letter A-Z")
        self._step_rotors()

        signal = self.kb.forward(letter)
        signal = self.pb.forward(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def process(self, text: str) -> str:
        """Encipher every letter of *text*; anything else is copied as is."""
        out = []
        for ch in text:
            up = ch.upper()
            # "ß".upper() is "SS"; only single letters A-Z take the signal path
            if is_letter(up):
                out.append(self.encipher(up))
            else:
                out.append(ch)
        return "".join(out)

    def __repr__(self) -> str:
        return (
            f"<Enigma rotors={'-'.join(self._rotor_ids)} window={self.window} "
            f"reflector={self.reflector.name}>"
        )
