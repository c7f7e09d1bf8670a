"""Tests for plugboard swapping and pair validation."""

import pytest

from alphabet import ALPHABET
from plugboard import Plugboard, normalise_pairs, plugboard_swap


def test_swap_both_directions() -> None:
    pairs = [("A", "B"), ("C", "D")]
    assert plugboard_swap("A", pairs) == "B"
    assert plugboard_swap("B", pairs) == "A"
    assert plugboard_swap("C", pairs) == "D"
    assert plugboard_swap("D", pairs) == "C"


def test_swap_unplugged_letter_unchanged() -> None:
    pairs = [("A", "B")]
    assert plugboard_swap("Z", pairs) == "Z"
    assert plugboard_swap("X", pairs) == "X"
    assert plugboard_swap("A", []) == "A"


def test_swap_is_involution() -> None:
    pairs = normalise_pairs(["AZ", "BY", "QW", "EM"])
    for ch in ALPHABET:
        assert plugboard_swap(plugboard_swap(ch, pairs), pairs) == ch


def test_normalise_accepts_strings_and_tuples() -> None:
    assert normalise_pairs(["ab", ("c", "D")]) == (("A", "B"), ("C", "D"))
    assert normalise_pairs([]) == ()


@pytest.mark.parametrize(
    ("pairs", "message"),
    [
        (["ABC"], "exactly 2 symbols"),
        (["A"], "exactly 2 symbols"),
        (["A1"], "not in alphabet"),
        (["AA"], "to itself"),
        (["AB", "BC"], "already used"),
        (["AB", "CA"], "already used"),
    ],
)
def test_normalise_rejects_malformed(pairs: list, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        normalise_pairs(pairs)


def test_plugboard_object() -> None:
    pb = Plugboard(["AB", "cd"])
    assert pb.pairs == (("A", "B"), ("C", "D"))
    assert pb.swap("D") == "C"
    assert pb.swap("E") == "E"
    assert repr(pb) == "<Plugboard AB CD>"
