"""FM-index primitives: letter encodings, BWT blocks, occurrence vectors and seed table lookups."""

__version__ = "0.1.0"
__all__ = ["types", "letters", "index", "occurrence", "kmer_table"]