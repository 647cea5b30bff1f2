import pytest

from alphabet import ALPHABET, to_index, to_letter
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard, swap


def test_swap_function():
    assert swap("A", [("A", "B")]) == "B"
    assert swap("B", [("A", "B")]) == "A"
    assert swap("C", [("A", "B")]) == "C"
    assert swap("A", []) == "A"


def test_swap_accepts_two_letter_strings():
    assert swap("D", ["AB", "CD"]) == "C"


def test_swap_first_match_wins_for_repeated_letter():
    pairs = [("A", "B"), ("A", "C")]
    assert swap("A", pairs) == "B"
    assert swap("C", pairs) == "A"
    assert swap("B", pairs) == "A"


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [("A", "B")],
        [("A", "B"), ("C", "D")],
        ["QW", "ER", "TY", "UI", "OP", "AS", "DF", "GH", "JK", "LZ"],
        [ALPHABET[i : i + 2] for i in range(0, 26, 2)],
    ],
)
def test_swap_is_an_involution(pairs):
    board = Plugboard(pairs)
    for letter in ALPHABET:
        assert swap(swap(letter, pairs), pairs) == letter
        assert board.swap(board.swap(letter)) == letter
        assert board.swap(letter) == swap(letter, pairs)


def test_plugboard_signal_paths():
    board = Plugboard(["AZ"])
    assert board.forward(to_index("A")) == to_index("Z")
    assert board.backward(to_index("Z")) == to_index("A")
    assert board.forward(to_index("M")) == to_index("M")


def test_plugboard_normalises_case_and_shape():
    board = Plugboard(["ab", ("c", "d"), ["E", "F"]])
    assert board.pairs == (("A", "B"), ("C", "D"), ("E", "F"))
    assert board.swap("B") == "A"
    assert repr(board) == "<Plugboard AB CD EF>"


def test_full_plugboard_is_accepted():
    board = Plugboard([ALPHABET[i : i + 2] for i in range(0, 26, 2)])
    assert len(board.pairs) == 13


@pytest.mark.parametrize(
    "pairs, fragment",
    [
        (["A1"], "not in alphabet"),
        (["AA"], "itself"),
        (["AB", "BC"], "already used"),
        (["ABC"], "exactly 2"),
        ([("A",)], "exactly 2"),
        ([5], "two letters"),
        ("AB CD", "sequence of pairs"),
        ([ALPHABET[i : i + 2] for i in range(0, 26, 2)] + ["AB"], "Too many"),
    ],
)
def test_bad_plugboards_fail_fast(pairs, fragment):
    with pytest.raises(ConfigurationError, match=fragment):
        Plugboard(pairs)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        Plugboard(["AA"])


def test_keyboard_round_trip():
    kb = Keyboard()
    for letter in ALPHABET:
        assert kb.backward(kb.forward(letter)) == letter
    with pytest.raises(ValueError):
        kb.forward("!")
    with pytest.raises(ValueError):
        kb.backward(26)
    assert to_letter(kb.forward("Q")) == "Q"
