"""Letter occurrence vectors and letter lookups within a single BWT block."""

from __future__ import annotations

from .index import AminoBlock, NucleotideBlock
from .letters import amino_vector_to_index, nucleotide_vector_to_index
from .types import POSITIONS_PER_FM_BLOCK

_VECTOR_MASK = (1 << POSITIONS_PER_FM_BLOCK) - 1

# For each letter index: (bit vectors that must be set, bit vectors that must be
# clear). Only as many bits are tested as are needed to tell the letter apart
# from every other encoding that can occur in a block.
_NUCLEOTIDE_SELECTORS: tuple[tuple[tuple[int, ...], tuple[int, ...]], ...] = (
    ((2, 1), ()),  # A 0b110
    ((2, 0), ()),  # C 0b101
    ((1, 0), ()),  # G 0b011
    ((0,), (2, 1)),  # T/U 0b001
    ((1,), (2, 0)),  # ambiguity X 0b010
)

_AMINO_SELECTORS: tuple[tuple[tuple[int, ...], tuple[int, ...]], ...] = (
    ((3, 2), (4,)),  # A 0b01100
    ((2, 1, 0), (3,)),  # C 0b10111
    ((1, 0), (4,)),  # D 0b00011
    ((2, 1), (4,)),  # E 0b00110
    ((3, 2, 1), (0,)),  # F 0b11110
    ((4,), (2, 0)),  # G 0b11010
    ((3, 1, 0), (2,)),  # H 0b11011
    ((4,), (2, 1)),  # I 0b11001
    ((4,), (3, 1)),  # K 0b10101
    ((4,), (1, 0)),  # L 0b11100
    ((3, 2, 0), (1,)),  # M 0b11101
    ((3,), (2, 1, 0)),  # N 0b01000
    ((3, 0), (4,)),  # P 0b01001
    ((2,), (3, 1, 0)),  # Q 0b00100
    ((4,), (3, 2)),  # R 0b10011
    ((3, 1), (4,)),  # S 0b01010
    ((2, 0), (4,)),  # T 0b00101
    ((4,), (3, 0)),  # V 0b10110
    ((0,), (3, 2, 1)),  # W 0b00001
    ((1,), (3, 2, 0)),  # Y 0b00010
    ((3, 2, 1, 0), ()),  # ambiguity Z 0b11111
)


def _check_block(block: object, expected: type) -> None:
    if not isinstance(block, expected):
        raise TypeError(f"expected a {expected.__name__}, got {type(block).__name__}")


def _select(
    vectors: tuple[int, ...],
    selectors: tuple[tuple[tuple[int, ...], tuple[int, ...]], ...],
    letter: int,
    what: str,
) -> int:
    if not 0 <= letter < len(selectors):
        raise ValueError(
            f"{what} letter index {letter} is outside 0..{len(selectors) - 1}"
        )
    ones, zeros = selectors[letter]
    result = _VECTOR_MASK
    for bit in ones:
        result &= vectors[bit]
    for bit in zeros:
        result &= ~vectors[bit]
    return result & _VECTOR_MASK


def _compressed_letter(vectors: tuple[int, ...], local_position: int) -> int:
    if not 0 <= local_position < POSITIONS_PER_FM_BLOCK:
        raise ValueError(
            f"local position {local_position} is outside "
            f"0..{POSITIONS_PER_FM_BLOCK - 1}"
        )
    return sum(
        ((vector >> local_position) & 1) << bit for bit, vector in enumerate(vectors)
    )


def nucleotide_occurrence_vector(block: NucleotideBlock, letter: int) -> int:
    """Bit mask of the block positions holding the given nucleotide index (0..4).

    The sentinel cannot be searched for and is never reported.
    """
    _check_block(block, NucleotideBlock)
    return _select(block.letter_bit_vectors, _NUCLEOTIDE_SELECTORS, letter, "nucleotide")


def amino_occurrence_vector(block: AminoBlock, letter: int) -> int:
    """Bit mask of the block positions holding the given amino index (0..20).

    The sentinel cannot be searched for and is never reported.
    """
    _check_block(block, AminoBlock)
    return _select(block.letter_bit_vectors, _AMINO_SELECTORS, letter, "amino")


def nucleotide_letter_at(block: NucleotideBlock, local_position: int) -> int:
    """Letter index stored at a position within a nucleotide block."""
    _check_block(block, NucleotideBlock)
    return nucleotide_vector_to_index(
        _compressed_letter(block.letter_bit_vectors, local_position)
    )


def amino_letter_at(block: AminoBlock, local_position: int) -> int:
    """Letter index stored at a position within an amino block."""
    _check_block(block, AminoBlock)
    return amino_vector_to_index(
        _compressed_letter(block.letter_bit_vectors, local_position)
    )