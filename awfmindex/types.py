"""Shared enumerations, constants and the package exception."""

from __future__ import annotations

from enum import IntEnum

POSITIONS_PER_FM_BLOCK = 256
CACHE_LINE_SIZE_IN_BYTES = 64

NUCLEOTIDE_VECTORS_PER_WINDOW = 3
NUCLEOTIDE_CARDINALITY = 4

AMINO_VECTORS_PER_WINDOW = 5
AMINO_CARDINALITY = 20

NUM_CONCURRENT_QUERIES = 8


class AlphabetType(IntEnum):
    """Alphabet an index is built over."""

    AMINO = 1
    DNA = 2
    RNA = 3


class BwtType(IntEnum):
    """Direction(s) in which the BWT can be searched."""

    BACKWARD_ONLY = 1
    BIDIRECTIONAL = 2


class ReturnCode(IntEnum):
    """Outcome codes of index operations; negative values are failures."""

    SUCCESS = 1
    FILE_READ_OKAY = 2
    FILE_WRITE_OKAY = 3
    GENERAL_FAILURE = -1
    UNSUPPORTED_VERSION_ERROR = -2
    ALLOCATION_FAILURE = -3
    NULL_PTR_ERROR = -4
    SUFFIX_ARRAY_CREATION_FAILURE = -5
    ILLEGAL_POSITION_ERROR = -6
    NO_FILE_SRC_GIVEN = -7
    NO_DATABASE_SEQUENCE_GIVEN = -8
    FILE_FORMAT_ERROR = -9
    FILE_OPEN_FAIL = -10
    FILE_READ_FAIL = -11
    FILE_WRITE_FAIL = -12
    ERROR_DB_SEQUENCE_NULL = -13
    ERROR_SUFFIX_ARRAY_NULL = -14
    FILE_ALREADY_EXISTS = -15

    def is_failure(self) -> bool:
        """True if this code describes an error condition."""
        return self.value < 0

    def is_success(self) -> bool:
        """True if this code describes a successful operation."""
        return not self.is_failure()


class AwFmError(Exception):
    """Raised when an index operation fails; carries the failing code."""

    def __init__(self, code: ReturnCode, message: str | None = None) -> None:
        self.code = ReturnCode(code)
        if not self.code.is_failure():
            raise ValueError(f"{self.code.name} is not a failure code")
        self.message = message
        text = self.code.name if message is None else f"{self.code.name}: {message}"
        super().__init__(text)