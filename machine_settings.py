# machine_settings.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from debug import Debug
from enigma import Enigma
from errors import ConfigurationError
from keyboard_and_plugboard import normalise_pair
from rotor_and_reflector import Reflector
from utilities import DEFAULT_REFLECTOR, parse_pairs, parse_rotors, parse_settings

debug = Debug()

REQUIRED_KEYS = {"rotors", "positions"}
ALIASES = {"ring_set": "ring_settings", "plugboard": "plugs"}


@dataclass(frozen=True, slots=True)
class MachineSettings:
    """Everything needed to build one machine (a key-sheet entry)."""

    rotors: Tuple[str | int, ...]
    positions: Tuple[int, ...]
    ring_settings: Tuple[int, ...] = (0, 0, 0)
    plugs: Tuple[str, ...] = field(default_factory=tuple)
    reflector: str | Reflector = DEFAULT_REFLECTOR

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MachineSettings":
        if not isinstance(data, dict):
            raise ConfigurationError("Key-sheet must be a JSON object")
        data = {ALIASES.get(k, k): v for k, v in data.items()}
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")

        settings = cls(
            rotors=tuple(parse_rotors(data["rotors"])),
            positions=tuple(parse_settings(data["positions"], "Positions")),
            ring_settings=tuple(
                parse_settings(data.get("ring_settings", (0, 0, 0)), "Ring settings")
            ),
            plugs=tuple(
                "".join(normalise_pair(p)) for p in parse_pairs(data.get("plugs", ()))
            ),
            reflector=data.get("reflector", DEFAULT_REFLECTOR),
        )
        # surface bad values now, not on first build
        settings.build()
        return settings

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.reflector, Reflector):
            raise ConfigurationError("Only named reflectors can be written to a key-sheet")
        return {
            "rotors": list(self.rotors),
            "positions": list(self.positions),
            "ring_settings": list(self.ring_settings),
            "plugs": list(self.plugs),
            "reflector": self.reflector,
        }

    def build(self) -> Enigma:
        return Enigma.from_settings(self)


def load_config(path: str | Path) -> MachineSettings:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read key-sheet {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Key-sheet {path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Key-sheet {path} is not valid JSON: {exc}") from exc

    settings = MachineSettings.from_dict(data)
    debug.log("config", f"loaded {path}: {settings}")
    return settings


def save_config(settings: MachineSettings, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    debug.log("config", f"wrote {path}")
    return path
