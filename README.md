# awfmindex

Building blocks for an FM-index over DNA, RNA or protein sequences.

The package holds:

- `awfmindex.types`: the `AlphabetType` enum (`AMINO`, `DNA`, `RNA`), the
  `BwtType` enum, the `ReturnCode` enum with `is_failure()` /
  `is_success()`, the `AwFmError` exception (built from a failure code and
  an optional message), and block and alphabet size constants.
- `awfmindex.letters`: conversion between ASCII letters, letter indices and
  the compressed bit-vector encoding kept in BWT blocks, for both
  nucleotides and amino acids, plus `letter_is_ambiguous`. Letters may be
  given as one-character `str`, one-byte `bytes` or an `int` in 0..255.
- `awfmindex.index`: `IndexConfiguration`, `SearchRange`, the
  `NucleotideBlock` and `AminoBlock` BWT block types (packing from letter
  indices, `to_bytes` / `from_bytes`), and `FmIndex`, which holds the
  blocks, prefix sums, the k-mer seed table and optionally a suffix array
  and the original sequence, and checks them for consistency.
- `awfmindex.occurrence`: the occurrence bit mask of a letter within a
  block, and the letter stored at a given position in a block.
- `awfmindex.kmer_table`: lookups in the k-mer seed table that gives the
  BWT range for the last letters of a query.

## Install

```
pip install .
```

## Examples

Letter encodings:

```python
from awfmindex.letters import (
    nucleotide_to_letter_index,
    sanitize_nucleotide,
    amino_to_letter_index,
    sanitize_amino,
    letter_is_ambiguous,
)
from awfmindex.types import AlphabetType

nucleotide_to_letter_index(sanitize_nucleotide("G"))   # 2
nucleotide_to_letter_index(sanitize_nucleotide("n"))   # 4, ambiguity
amino_to_letter_index(sanitize_amino("W"))             # 18
amino_to_letter_index("$")                             # 21, sentinel
letter_is_ambiguous("x", AlphabetType.AMINO)           # True
```

Search ranges cover BWT positions from `start_ptr` (inclusive) to
`end_ptr` (exclusive); a range is valid while `start_ptr < end_ptr`:

```python
from awfmindex.index import SearchRange

r = SearchRange(10, 14)
r.is_valid()                # True
r.length()                  # 4
SearchRange(5, 5).length()  # 0
```

Blocks and occurrence vectors:

```python
from awfmindex.index import NucleotideBlock
from awfmindex.occurrence import nucleotide_letter_at, nucleotide_occurrence_vector

block = NucleotideBlock.from_letter_indices([0, 1, 2, 3])  # a c g t
nucleotide_letter_at(block, 2)          # 2
nucleotide_occurrence_vector(block, 0)  # 1, bit 0 marks the 'a'
NucleotideBlock.from_bytes(block.to_bytes()) == block  # True
```

Seed table lookups take an `FmIndex` and the query k-mer and return a
`SearchRange`:

```python
from awfmindex.kmer_table import query_can_use_kmer_table, seed_range

if query_can_use_kmer_table(index, "acgtacgt"):
    start = seed_range(index, "acgtacgt")
```

A query can use the table when it is at least as long as the k-mers stored
in it and its last letters hold no ambiguity characters. `seed_range`
raises `ValueError` for a k-mer shorter than the seed length or holding a
letter that has no place in the table.

## What the package does not do

It does not build an index from a sequence or a FASTA file, does not
compute suffix arrays, BWTs, prefix sums or seed tables, and does not read
or write index files. There is no backward search, count or locate over a
whole index. An `FmIndex` has to be assembled from parts computed
elsewhere.

## Tests

```
pip install .[test]
pytest
```