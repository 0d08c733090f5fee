"""Lookups into the memoized k-mer seed table of an FM-index."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .index import FmIndex, SearchRange
from .letters import (
    Letter,
    amino_to_letter_index,
    letter_is_ambiguous,
    nucleotide_to_letter_index,
)
from .types import AMINO_CARDINALITY, NUCLEOTIDE_CARDINALITY

Kmer = str | bytes | Sequence[Letter]


def _seed_suffix(index: FmIndex, kmer: Kmer) -> Sequence[Letter]:
    seed_length = index.config.kmer_length_in_seed_table
    if len(kmer) < seed_length:
        raise ValueError(
            f"k-mer of length {len(kmer)} is shorter than the seed length {seed_length}"
        )
    return kmer[len(kmer) - seed_length :]


def query_can_use_kmer_table(index: FmIndex, kmer: Kmer) -> bool:
    """True if the k-mer is long enough and its seed suffix has no ambiguity codes."""
    seed_length = index.config.kmer_length_in_seed_table
    if len(kmer) < seed_length:
        return False
    suffix = kmer[len(kmer) - seed_length :]
    return not any(
        letter_is_ambiguous(letter, index.alphabet_type) for letter in suffix
    )


def _table_range(
    index: FmIndex,
    kmer: Kmer,
    to_index: Callable[[Letter], int],
    cardinality: int,
) -> SearchRange:
    table_index = 0
    for letter in _seed_suffix(index, kmer):
        letter_index = to_index(letter)
        if not 0 <= letter_index < cardinality:
            raise ValueError(f"letter {letter!r} cannot be looked up in the seed table")
        table_index = table_index * cardinality + letter_index
    return index.kmer_seed_table[table_index]


def nucleotide_seed_range(index: FmIndex, kmer: Kmer) -> SearchRange:
    """Seed-table range for the nucleotide k-mer's suffix of seed length."""
    return _table_range(
        index, kmer, nucleotide_to_letter_index, NUCLEOTIDE_CARDINALITY
    )


def amino_seed_range(index: FmIndex, kmer: Kmer) -> SearchRange:
    """Seed-table range for the amino acid k-mer's suffix of seed length."""
    return _table_range(index, kmer, amino_to_letter_index, AMINO_CARDINALITY)


def seed_range(index: FmIndex, kmer: Kmer) -> SearchRange:
    """Seed-table range for the k-mer, using the index's alphabet."""
    if index.is_amino:
        return amino_seed_range(index, kmer)
    return nucleotide_seed_range(index, kmer)