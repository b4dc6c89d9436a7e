"""
Tests for the text RLE codec.
"""
import pytest
from hypothesis import assume, given, strategies as st

from text_rle.errors import MalformedInput
from text_rle.RLE import compress, decompress, runs, tokens

# A small alphabet so that runs actually show up
Texts = st.text(alphabet="AaBb ", max_size=200)
AlphabetTexts = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz ", max_size=200
)


def test_empty_input():
    assert compress("") == ""
    assert decompress("") == ""


def test_uniform_runs():
    assert compress("AABBBCCCC") == "2A3B4C"
    assert decompress("2A3B4C") == "AABBBCCCC"


def test_mixed_run_lengths():
    text = "WWWWWWWWWWWWBWWWWWWWWWWWWBBBWWWWWWWWWWWWWWWWWWWWWWWWB"
    assert compress(text) == "12WB12W3B24WB"
    assert decompress("12WB12W3B24WB") == text


def test_single_characters_are_left_bare():
    assert compress("AABCCCDEEEE") == "2AB3CD4E"
    assert decompress("2AB3CD4E") == "AABCCCDEEEE"


def test_case_is_preserved():
    assert compress("aabbbcccc") == "2a3b4c"
    assert compress("AaAa") == "AaAa"
    assert compress("AAaa") == "2A2a"


def test_whitespace_is_a_regular_symbol():
    assert compress("  hsqq qww  ") == "2 hs2q q2w2 "
    assert decompress("2 hs2q q2w2 ") == "  hsqq qww  "


def test_decompress_accepts_any_valid_count():
    assert decompress("10WB12W3B24WB") == "W" * 10 + "B" + "W" * 12 + "BBB" + "W" * 24 + "B"


def test_decompress_does_not_merge_adjacent_tokens():
    assert decompress("2A3A") == "AAAAA"


def test_leading_zeros_are_tolerated():
    assert decompress("03A") == "AAA"
    assert decompress("002 ") == "  "


def test_long_zero_padded_counts():
    assert decompress("0" * 5000 + "3A") == "AAA"
    assert decompress("0" * 5000 + "A") == ""


def test_zero_count_expands_to_nothing():
    assert decompress("0A") == ""
    assert decompress("B0AC") == "BC"


def test_long_run_count():
    assert compress("x" * 1234) == "1234x"
    assert decompress("1234x") == "x" * 1234


@pytest.mark.parametrize(
    "encoded, position",
    [
        ("5", 0),
        ("123", 0),
        ("2A13", 2),
        ("A B9", 3),
    ],
)
def test_trailing_count_is_malformed(encoded, position):
    with pytest.raises(MalformedInput) as excinfo:
        decompress(encoded)
    assert excinfo.value.position == position
    assert excinfo.value.text == encoded


def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        decompress("5")


def test_runs():
    assert runs("") == []
    assert runs("AAB  ") == [(2, "A"), (1, "B"), (2, " ")]


def test_tokens():
    assert tokens("12WB") == [(12, "W"), (1, "B")]
    assert tokens("0A") == [(0, "A")]


@given(AlphabetTexts)
def test_decodes_to_starting_text(text):
    assert decompress(compress(text)) == text


@given(Texts)
def test_runs_partition_the_text(text):
    found = runs(text)
    assert "".join(char * count for count, char in found) == text
    assert all(count >= 1 for count, _ in found)
    for (_, left), (_, right) in zip(found, found[1:]):
        assert left != right


@given(AlphabetTexts)
def test_text_without_repeats_is_unchanged(text):
    # Collapse every run to one character
    text = "".join(c for i, c in enumerate(text) if i == 0 or c != text[i - 1])
    assert compress(text) == text


@given(Texts, st.data())
def test_duplicating_a_character_does_not_add_a_run(text, data):
    assume(text)
    i = data.draw(st.integers(0, len(text) - 1))
    longer = text[:i] + text[i] + text[i:]
    assert len(runs(longer)) == len(runs(text))
