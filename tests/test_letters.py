import string

import pytest

from awfmindex.letters import (
    amino_index_to_vector,
    amino_to_letter_index,
    amino_vector_to_index,
    letter_is_ambiguous,
    nucleotide_index_to_vector,
    nucleotide_to_letter_index,
    nucleotide_vector_to_index,
    sanitize_amino,
    sanitize_nucleotide,
)
from awfmindex.types import AlphabetType

NUCLEOTIDE_EXPECTED = {"a": 0, "c": 1, "g": 2, "t": 3, "u": 3}

AMINO_EXPECTED = {
    "a": 0, "c": 1, "d": 2, "e": 3, "f": 4, "g": 5, "h": 6, "i": 7,
    "k": 8, "l": 9, "m": 10, "n": 11, "p": 12, "q": 13, "r": 14,
    "s": 15, "t": 16, "v": 17, "w": 18, "y": 19,
}


@pytest.mark.parametrize("c", string.ascii_lowercase)
def test_nucleotide_ascii(c):
    expected = NUCLEOTIDE_EXPECTED.get(c, 4)
    assert nucleotide_to_letter_index(sanitize_nucleotide(c)) == expected
    assert nucleotide_to_letter_index(sanitize_nucleotide(c.upper())) == expected


def test_nucleotide_sentinel():
    assert sanitize_nucleotide("$") == "$"
    assert nucleotide_to_letter_index(sanitize_nucleotide("$")) == 5


def test_nucleotide_sanitize_ambiguity():
    assert sanitize_nucleotide("N") == "x"
    assert sanitize_nucleotide("G") == "g"


@pytest.mark.parametrize(
    "letter, expected",
    [
        ("a", 0), ("A", 0), ("b", 20), ("B", 20), ("c", 1), ("C", 1),
        ("d", 2), ("D", 2), ("e", 3), ("E", 3), ("f", 4), ("F", 4),
        ("g", 5), ("G", 5), ("h", 6), ("H", 6), ("i", 7), ("I", 7),
        ("j", 20), ("J", 20), ("k", 8), ("K", 8), ("l", 9), ("L", 9),
        ("m", 10), ("M", 10), ("n", 11), ("N", 11), ("o", 20), ("O", 20),
        ("p", 12), ("P", 12), ("q", 13), ("Q", 13), ("r", 14), ("R", 14),
        ("s", 15), ("S", 15), ("t", 16), ("T", 16), ("u", 20), ("v", 17),
        ("w", 18), ("W", 18), ("x", 20), ("X", 20), ("y", 19), ("Y", 19),
        ("z", 20), ("Z", 20), ("$", 21),
    ],
)
def test_amino_index(letter, expected):
    assert amino_to_letter_index(sanitize_amino(letter)) == expected


@pytest.mark.parametrize("c", string.ascii_lowercase)
def test_compressed_aminos(c):
    expected = AMINO_EXPECTED.get(c, 20)
    assert amino_to_letter_index(sanitize_amino(c)) == expected
    assert amino_to_letter_index(sanitize_amino(c.upper())) == expected


def test_sanitize_amino_ambiguity_codes():
    assert sanitize_amino("b") == "z"
    assert sanitize_amino("X") == "z"
    assert sanitize_amino(0) == "z"
    assert sanitize_amino("K") == "K"


def test_letters_accept_bytes_and_ints():
    assert nucleotide_to_letter_index(b"G") == 2
    assert nucleotide_to_letter_index(ord("t")) == 3
    assert amino_to_letter_index(b"w") == 18


@pytest.mark.parametrize("bad", ["", "ac", 256, -1])
def test_bad_letter_rejected(bad):
    with pytest.raises(ValueError):
        nucleotide_to_letter_index(bad)


def test_non_letter_type_rejected():
    with pytest.raises(TypeError):
        amino_to_letter_index(1.5)


@pytest.mark.parametrize("index", range(6))
def test_nucleotide_vector_round_trip(index):
    assert nucleotide_vector_to_index(nucleotide_index_to_vector(index)) == index


@pytest.mark.parametrize("index", range(22))
def test_amino_vector_round_trip(index):
    assert amino_vector_to_index(amino_index_to_vector(index)) == index


def test_vectors_are_distinct():
    nucleotide_vectors = [nucleotide_index_to_vector(i) for i in range(6)]
    amino_vectors = [amino_index_to_vector(i) for i in range(22)]
    assert len(set(nucleotide_vectors)) == 6
    assert len(set(amino_vectors)) == 22
    assert all(0 <= v < 8 for v in nucleotide_vectors)
    assert all(0 <= v < 32 for v in amino_vectors)


def test_vector_tables_pinned():
    assert nucleotide_index_to_vector(0) == 6
    assert amino_index_to_vector(0) == 0x0C
    assert amino_index_to_vector(20) == 0x1F


@pytest.mark.parametrize(
    "func, value",
    [
        (nucleotide_index_to_vector, 6),
        (nucleotide_vector_to_index, 7),
        (amino_index_to_vector, 22),
        (amino_vector_to_index, 32),
        (amino_vector_to_index, -1),
    ],
)
def test_table_out_of_range(func, value):
    with pytest.raises(ValueError):
        func(value)


@pytest.mark.parametrize("letter", ["z", "X", "b", "B"])
def test_amino_ambiguous(letter):
    assert letter_is_ambiguous(letter, AlphabetType.AMINO)


@pytest.mark.parametrize("letter", AMINO_EXPECTED)
def test_amino_not_ambiguous(letter):
    assert not letter_is_ambiguous(letter, AlphabetType.AMINO)
    assert not letter_is_ambiguous(letter.upper(), AlphabetType.AMINO)


@pytest.mark.parametrize("alphabet", [AlphabetType.DNA, AlphabetType.RNA])
def test_nucleotide_ambiguity(alphabet):
    for letter in "acgtuACGTU":
        assert not letter_is_ambiguous(letter, alphabet)
    for letter in "nNxR$":
        assert letter_is_ambiguous(letter, alphabet)