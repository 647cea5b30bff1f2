import json

import pytest

from enigma import Enigma
from errors import ConfigurationError
from machine_settings import MachineSettings, load_config, save_config
from utilities import REFLECTORS


def write(tmp_path, data):
    path = tmp_path / "enigma_config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_minimal_key_sheet(tmp_path):
    settings = load_config(write(tmp_path, {"rotors": ["I", "II", "III"], "positions": "AAA"}))
    assert settings == MachineSettings(rotors=("I", "II", "III"), positions=(0, 0, 0))
    assert settings.ring_settings == (0, 0, 0)
    assert settings.plugs == ()
    assert settings.reflector == "A"


def test_load_full_key_sheet_with_aliases(tmp_path):
    path = write(
        tmp_path,
        {
            "rotors": "IV V I",
            "positions": [1, 2, 3],
            "ring_set": "BCD",
            "plugboard": ["ab", ["C", "D"]],
            "reflector": "B",
        },
    )
    settings = load_config(path)
    assert settings.rotors == ("IV", "V", "I")
    assert settings.positions == (1, 2, 3)
    assert settings.ring_settings == (1, 2, 3)
    assert settings.plugs == ("AB", "CD")
    assert settings.reflector == "B"


def test_plugs_may_be_a_string(tmp_path):
    settings = load_config(
        write(tmp_path, {"rotors": [0, 1, 2], "positions": "AAA", "plugs": "AB CD"})
    )
    assert settings.plugs == ("AB", "CD")


def test_save_and_load_round_trip(tmp_path):
    original = MachineSettings(
        rotors=("II", "IV", "V"),
        positions=(10, 20, 5),
        ring_settings=(0, 1, 2),
        plugs=("AZ", "BY"),
        reflector="C",
    )
    path = save_config(original, tmp_path / "sheet.json")
    assert json.loads(path.read_text(encoding="utf-8"))["plugs"] == ["AZ", "BY"]
    assert load_config(path) == original


def test_loaded_settings_build_matching_machines(tmp_path):
    path = write(
        tmp_path,
        {"rotors": ["I", "II", "III"], "positions": "AAA", "plugs": ["AB", "CD"]},
    )
    settings = load_config(path)
    ciphertext = settings.build().process("HELLO")
    assert ciphertext == Enigma(["I", "II", "III"], [0, 0, 0], [0, 0, 0], ["AB", "CD"]).process("HELLO")
    assert settings.build().process(ciphertext) == "HELLO"


@pytest.mark.parametrize(
    "data, fragment",
    [
        ({"positions": "AAA"}, "Missing keys"),
        ({"rotors": ["I", "II", "III"]}, "Missing keys"),
        ({"rotors": ["I", "II", "IX"], "positions": "AAA"}, "Unknown rotor"),
        ({"rotors": ["I", "II", "III"], "positions": "AA"}, "expected 3"),
        ({"rotors": ["I", "II", "III"], "positions": [0, 0, 30]}, "out of range"),
        ({"rotors": ["I", "II", "III"], "positions": "AAA", "plugs": ["AB", "AC"]}, "already used"),
        ({"rotors": ["I", "II", "III"], "positions": "AAA", "plugs": [["A", "B", "C"]]}, "exactly 2"),
        ({"rotors": ["I", "II", "III"], "positions": "AAA", "reflector": "Z"}, "Unknown reflector"),
        ({"rotors": 3, "positions": "AAA"}, "sequence"),
        (["I", "II", "III"], "JSON object"),
    ],
)
def test_bad_key_sheets(tmp_path, data, fragment):
    with pytest.raises(ConfigurationError, match=fragment):
        load_config(write(tmp_path, data))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="not valid JSON"):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_config(tmp_path / "absent.json")


def test_custom_reflector_cannot_be_saved(tmp_path):
    settings = MachineSettings(rotors=("I", "II", "III"), positions=(0, 0, 0), reflector=REFLECTORS["B"])
    assert settings.build().process("AAAAA") == "BDZGO"
    with pytest.raises(ConfigurationError):
        save_config(settings, tmp_path / "x.json")


def test_non_utf8_key_sheet(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"rotors": "\xff"}')
    with pytest.raises(ConfigurationError, match="not UTF-8"):
        load_config(path)
