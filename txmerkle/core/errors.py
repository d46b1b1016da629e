"""
Merkle root computation errors.

Every failure of the core is raised as a subclass of :class:`MerkleError`
at the point where it is detected. Input/output failures are not wrapped:
``FileNotFoundError``, ``PermissionError`` and the other ``OSError``
subclasses reach the caller unchanged.
"""

from __future__ import annotations

from typing import Optional


class MerkleError(Exception):
    """Base class for errors raised while computing a Merkle root."""
    pass


class HashFormatError(MerkleError, ValueError):
    """
    Raised when the input file does not follow the one-hash-per-line format.

    Attributes:
        line_number: The 1-based number of the offending line, or None when
                     the problem concerns the file as a whole.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class EmptyInputError(MerkleError):
    """Raised when there are no entries to reduce."""
    pass
