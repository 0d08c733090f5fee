"""In-memory structures of an FM-index: configuration, ranges and BWT blocks."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from .letters import amino_index_to_vector, nucleotide_index_to_vector
from .types import (
    AMINO_CARDINALITY,
    AMINO_VECTORS_PER_WINDOW,
    NUCLEOTIDE_CARDINALITY,
    NUCLEOTIDE_VECTORS_PER_WINDOW,
    POSITIONS_PER_FM_BLOCK,
    AlphabetType,
)

_VECTOR_BITS = POSITIONS_PER_FM_BLOCK
_VECTOR_BYTES = _VECTOR_BITS // 8
_VECTOR_MASK = (1 << _VECTOR_BITS) - 1


def _check_uint8(name: str, value: int, minimum: int = 0) -> int:
    value = int(value)
    if not minimum <= value <= 0xFF:
        raise ValueError(f"{name} must be in {minimum}..255, got {value}")
    return value


@dataclass(frozen=True)
class IndexConfiguration:
    """User-settable options an index is built with."""

    suffix_array_compression_ratio: int
    kmer_length_in_seed_table: int
    alphabet_type: AlphabetType
    keep_suffix_array_in_memory: bool = True
    store_original_sequence: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "suffix_array_compression_ratio",
            _check_uint8(
                "suffix_array_compression_ratio",
                self.suffix_array_compression_ratio,
                minimum=1,
            ),
        )
        object.__setattr__(
            self,
            "kmer_length_in_seed_table",
            _check_uint8(
                "kmer_length_in_seed_table", self.kmer_length_in_seed_table, minimum=1
            ),
        )
        object.__setattr__(self, "alphabet_type", AlphabetType(self.alphabet_type))
        object.__setattr__(
            self, "keep_suffix_array_in_memory", bool(self.keep_suffix_array_in_memory)
        )
        object.__setattr__(
            self, "store_original_sequence", bool(self.store_original_sequence)
        )


@dataclass(frozen=True, slots=True)
class SearchRange:
    """Range of BWT positions: inclusive start_ptr, exclusive end_ptr."""

    start_ptr: int
    end_ptr: int

    def is_valid(self) -> bool:
        """True if the range holds at least one position."""
        return self.start_ptr < self.end_ptr

    def length(self) -> int:
        """Number of positions in the range, or 0 if it is not valid."""
        return self.end_ptr - self.start_ptr if self.is_valid() else 0


@dataclass(frozen=True)
class _BwtBlock:
    """A window of BWT letters stored as bit-sliced 256-bit vectors."""

    VECTOR_COUNT: ClassVar[int]
    OCCURRENCE_SLOTS: ClassVar[int]
    ALPHABET_CARDINALITY: ClassVar[int]

    letter_bit_vectors: tuple[int, ...]
    base_occurrences: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        vectors = tuple(int(v) for v in self.letter_bit_vectors)
        if len(vectors) != self.VECTOR_COUNT:
            raise ValueError(
                f"{type(self).__name__} needs {self.VECTOR_COUNT} bit vectors, "
                f"got {len(vectors)}"
            )
        for vector in vectors:
            if not 0 <= vector <= _VECTOR_MASK:
                raise ValueError(f"bit vector does not fit in {_VECTOR_BITS} bits")
        occurrences = tuple(int(c) for c in self.base_occurrences) or (
            (0,) * self.OCCURRENCE_SLOTS
        )
        if len(occurrences) != self.OCCURRENCE_SLOTS:
            raise ValueError(
                f"{type(self).__name__} needs {self.OCCURRENCE_SLOTS} occurrence "
                f"counts, got {len(occurrences)}"
            )
        if any(not 0 <= c < 1 << 64 for c in occurrences):
            raise ValueError("occurrence counts must fit in an unsigned 64-bit value")
        object.__setattr__(self, "letter_bit_vectors", vectors)
        object.__setattr__(self, "base_occurrences", occurrences)

    @classmethod
    def byte_size(cls) -> int:
        """Size of the block in its serialized form."""
        return cls.VECTOR_COUNT * _VECTOR_BYTES + cls.OCCURRENCE_SLOTS * 8

    @staticmethod
    def _index_to_vector(letter_index: int) -> int:
        raise NotImplementedError

    @classmethod
    def from_letter_indices(
        cls, letter_indices: Iterable[int], base_occurrences: Sequence[int] = ()
    ):
        """Pack up to 256 letter indices into a block's bit vectors."""
        vectors = [0] * cls.VECTOR_COUNT
        count = 0
        for position, letter_index in enumerate(letter_indices):
            if position >= POSITIONS_PER_FM_BLOCK:
                raise ValueError(
                    f"a block holds at most {POSITIONS_PER_FM_BLOCK} letters"
                )
            encoded = cls._index_to_vector(letter_index)
            for bit in range(cls.VECTOR_COUNT):
                if (encoded >> bit) & 1:
                    vectors[bit] |= 1 << position
            count = position + 1
        del count
        return cls(tuple(vectors), tuple(base_occurrences))

    def to_bytes(self) -> bytes:
        """Serialize as little-endian vectors followed by 64-bit counts."""
        vector_bytes = b"".join(
            v.to_bytes(_VECTOR_BYTES, "little") for v in self.letter_bit_vectors
        )
        return vector_bytes + struct.pack(
            f"<{self.OCCURRENCE_SLOTS}Q", *self.base_occurrences
        )

    @classmethod
    def from_bytes(cls, data: bytes):
        """Rebuild a block from the bytes written by to_bytes."""
        data = bytes(data)
        if len(data) != cls.byte_size():
            raise ValueError(
                f"{cls.__name__} needs {cls.byte_size()} bytes, got {len(data)}"
            )
        split = cls.VECTOR_COUNT * _VECTOR_BYTES
        vectors = tuple(
            int.from_bytes(data[offset : offset + _VECTOR_BYTES], "little")
            for offset in range(0, split, _VECTOR_BYTES)
        )
        occurrences = struct.unpack(f"<{cls.OCCURRENCE_SLOTS}Q", data[split:])
        return cls(vectors, occurrences)


@dataclass(frozen=True)
class NucleotideBlock(_BwtBlock):
    """BWT block for nucleotide indices: three bit vectors per window."""

    VECTOR_COUNT: ClassVar[int] = NUCLEOTIDE_VECTORS_PER_WINDOW
    OCCURRENCE_SLOTS: ClassVar[int] = NUCLEOTIDE_CARDINALITY + 4
    ALPHABET_CARDINALITY: ClassVar[int] = NUCLEOTIDE_CARDINALITY

    @staticmethod
    def _index_to_vector(letter_index: int) -> int:
        return nucleotide_index_to_vector(letter_index)


@dataclass(frozen=True)
class AminoBlock(_BwtBlock):
    """BWT block for amino acid indices: five bit vectors per window."""

    VECTOR_COUNT: ClassVar[int] = AMINO_VECTORS_PER_WINDOW
    OCCURRENCE_SLOTS: ClassVar[int] = AMINO_CARDINALITY + 4
    ALPHABET_CARDINALITY: ClassVar[int] = AMINO_CARDINALITY

    @staticmethod
    def _index_to_vector(letter_index: int) -> int:
        return amino_index_to_vector(letter_index)


@dataclass
class FmIndex:
    """An FM-index held in memory: BWT blocks, prefix sums and k-mer seeds."""

    config: IndexConfiguration
    bwt_length: int
    blocks: Sequence[NucleotideBlock | AminoBlock]
    prefix_sums: Sequence[int]
    kmer_seed_table: Sequence[SearchRange]
    suffix_array: Sequence[int] | None = None
    sequence: bytes | None = None
    feature_flags: int = 0
    _block_type: type = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.bwt_length < 1:
            raise ValueError("bwt_length must be positive")
        self._block_type = AminoBlock if self.is_amino else NucleotideBlock
        self.blocks = tuple(self.blocks)
        for block in self.blocks:
            if not isinstance(block, self._block_type):
                raise TypeError(
                    f"{self.config.alphabet_type.name} index needs "
                    f"{self._block_type.__name__} blocks, got {type(block).__name__}"
                )
        if len(self.blocks) * POSITIONS_PER_FM_BLOCK < self.bwt_length:
            raise ValueError(
                f"{len(self.blocks)} blocks cannot hold {self.bwt_length} positions"
            )
        self.prefix_sums = tuple(int(v) for v in self.prefix_sums)
        if any(v < 0 for v in self.prefix_sums) or any(
            a > b for a, b in zip(self.prefix_sums, self.prefix_sums[1:])
        ):
            raise ValueError("prefix sums must be non-negative and non-decreasing")
        self.kmer_seed_table = tuple(self.kmer_seed_table)
        if len(self.kmer_seed_table) != self.kmer_seed_table_size:
            raise ValueError(
                f"k-mer seed table needs {self.kmer_seed_table_size} ranges, "
                f"got {len(self.kmer_seed_table)}"
            )
        if self.suffix_array is not None:
            self.suffix_array = tuple(int(v) for v in self.suffix_array)
        if self.sequence is not None:
            self.sequence = bytes(self.sequence)

    @property
    def alphabet_type(self) -> AlphabetType:
        return self.config.alphabet_type

    @property
    def is_amino(self) -> bool:
        return self.config.alphabet_type is AlphabetType.AMINO

    @property
    def cardinality(self) -> int:
        """Number of searchable letters in the index's alphabet."""
        return AMINO_CARDINALITY if self.is_amino else NUCLEOTIDE_CARDINALITY

    @property
    def kmer_seed_table_size(self) -> int:
        """Number of entries in a complete k-mer seed table."""
        return self.cardinality**self.config.kmer_length_in_seed_table

    def block_for_position(self, position: int) -> tuple[NucleotideBlock | AminoBlock, int]:
        """The block holding a BWT position and the position within it."""
        if not 0 <= position < self.bwt_length:
            raise IndexError(f"BWT position {position} is outside 0..{self.bwt_length - 1}")
        block_index, local = divmod(position, POSITIONS_PER_FM_BLOCK)
        return self.blocks[block_index], local