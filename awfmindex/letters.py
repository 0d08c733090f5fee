"""Conversions between ASCII letters, letter indices and compressed vectors."""

from __future__ import annotations

from collections.abc import Sequence

from .types import AlphabetType

Letter = str | int | bytes

_NUCLEOTIDE_INDICES = {"a": 0, "c": 1, "g": 2, "t": 3, "u": 3, "$": 5}
_NUCLEOTIDE_SANITIZED = {"a", "c", "g", "t", "u", "$"}
_NUCLEOTIDE_INDEX_TO_VECTOR = (6, 5, 3, 1, 2, 4)
_NUCLEOTIDE_VECTOR_TO_INDEX = (5, 3, 4, 2, 5, 1, 0)
_NUCLEOTIDE_UNAMBIGUOUS = frozenset("acgtu")

_AMINO_ENCODINGS = (
    20, 0, 20, 1, 2, 3, 4, 5, 6, 7, 20, 8, 9, 10, 11, 20,
    12, 13, 14, 15, 16, 20, 17, 18, 20, 19, 20, 20, 20, 20, 20, 20,
)
_AMINO_INDEX_TO_VECTOR = (
    0x0C, 0x17, 0x03, 0x06, 0x1E, 0x1A, 0x1B, 0x19, 0x15, 0x1C, 0x1D,
    0x08, 0x09, 0x04, 0x13, 0x0A, 0x05, 0x16, 0x01, 0x02, 0x1F, 0x00,
)
_AMINO_VECTOR_TO_INDEX = (
    21, 18, 19, 2, 13, 16, 3, 20, 11, 12, 15, 20, 0, 20, 20, 20,
    20, 20, 20, 14, 20, 8, 17, 1, 20, 7, 5, 6, 9, 10, 4, 20,
)
_AMINO_AMBIGUOUS = frozenset("zxb")


def _code(letter: Letter) -> int:
    """Return the byte value of a single letter given as str, bytes or int."""
    if isinstance(letter, int):
        if not 0 <= letter <= 0xFF:
            raise ValueError(f"letter code {letter} is outside 0..255")
        return letter
    if isinstance(letter, (str, bytes)):
        if len(letter) != 1:
            raise ValueError(f"expected a single letter, got {letter!r}")
        value = letter[0] if isinstance(letter, bytes) else ord(letter)
        if value > 0xFF:
            raise ValueError(f"letter {letter!r} is not an 8-bit character")
        return value
    raise TypeError(f"expected str, bytes or int, got {type(letter).__name__}")


def _lower(letter: Letter) -> str:
    return chr(_code(letter) | 0x20)


def _lookup(table: Sequence[int], key: int, what: str) -> int:
    if not 0 <= key < len(table):
        raise ValueError(f"{what} {key} is outside 0..{len(table) - 1}")
    return table[key]


def nucleotide_to_letter_index(ascii_letter: Letter) -> int:
    """Letter index of a nucleotide: a=0, c=1, g=2, t/u=3, '$'=5, other=4."""
    return _NUCLEOTIDE_INDICES.get(_lower(ascii_letter), 4)


def sanitize_nucleotide(ascii_letter: Letter) -> str:
    """Lower-case nucleotide or '$'; anything else becomes the ambiguity 'x'."""
    lowered = _lower(ascii_letter)
    return lowered if lowered in _NUCLEOTIDE_SANITIZED else "x"


def nucleotide_index_to_vector(letter_index: int) -> int:
    """Compressed 3-bit vector form of a nucleotide letter index (0..5)."""
    return _lookup(_NUCLEOTIDE_INDEX_TO_VECTOR, letter_index, "nucleotide index")


def nucleotide_vector_to_index(vector: int) -> int:
    """Letter index of a compressed 3-bit nucleotide vector (0..6)."""
    return _lookup(_NUCLEOTIDE_VECTOR_TO_INDEX, vector, "nucleotide vector")


def amino_to_letter_index(ascii_letter: Letter) -> int:
    """Letter index of an amino acid (0..19), 20 for ambiguity, 21 for '$'."""
    code = _code(ascii_letter)
    if code == ord("$"):
        return 21
    return _AMINO_ENCODINGS[code & 0x1F]


def sanitize_amino(ascii_letter: Letter) -> str:
    """The letter itself, or 'z' for the ambiguity codes b, x and NUL."""
    code = _code(ascii_letter)
    if chr(code | 0x20) in ("b", "x") or code == 0:
        return "z"
    return chr(code)


def amino_index_to_vector(letter_index: int) -> int:
    """Compressed 5-bit vector form of an amino letter index (0..21)."""
    return _lookup(_AMINO_INDEX_TO_VECTOR, letter_index, "amino index")


def amino_vector_to_index(vector: int) -> int:
    """Letter index of a compressed 5-bit amino vector (0..31)."""
    return _lookup(_AMINO_VECTOR_TO_INDEX, vector, "amino vector")


def letter_is_ambiguous(letter: Letter, alphabet: AlphabetType) -> bool:
    """True if the letter is an ambiguity code in the given alphabet."""
    lowered = chr(_code(letter)).lower()
    if AlphabetType(alphabet) is AlphabetType.AMINO:
        return lowered in _AMINO_AMBIGUOUS
    return lowered not in _NUCLEOTIDE_UNAMBIGUOUS