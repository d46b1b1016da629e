"""
Transaction ID File Decoder
============================

This module reads a text file of hex-encoded transaction ids into the packed
entry buffer consumed by the Merkle reduction.

File format:
- one transaction id per line, 64 hex characters (32 bytes) each
- lines separated by a single ``\\n``; the last line may omit it
- no header, no footer, no blank lines, no ``\\r\\n`` line endings

The decoded entries are written back to back into one ``bytearray`` with no
separators: entry ``i`` lives at ``data[i * 32:(i + 1) * 32]``.

Entry count
-----------
The number of entries is derived from the file's byte length alone, before
any line is looked at. Every line is nominally ``LINE_LENGTH`` (65) bytes, so
a length that is an exact multiple of 65 holds ``length / 65`` entries, and
any other length holds one more than ``length // 65``: a last line without
its newline still counts as a full entry. The line split is then
cross-checked against this count.
"""

from __future__ import annotations

import logging
import os

from txmerkle.core.errors import EmptyInputError, HashFormatError
from txmerkle.crypto.merkle import HASH_SIZE
from txmerkle.utils.encoding import decode_hash_line

logger = logging.getLogger(__name__)

LINE_LENGTH = 65
"""Byte length of one well-formed line: 64 hex characters plus ``\\n``."""


def entry_count_for_size(size: int) -> int:
    """
    Derive the number of entries from a file's byte length.

    Example:
        >>> entry_count_for_size(130), entry_count_for_size(129)
        (2, 2)
    """
    if size % LINE_LENGTH == 0:
        return size // LINE_LENGTH
    return size // LINE_LENGTH + 1


def line_count(file_path) -> int:
    """Return the number of entries in ``file_path``, judged by its size."""
    return entry_count_for_size(os.path.getsize(file_path))


def split_lines(text: str) -> list[str]:
    """
    Split file content into lines on ``\\n``.

    A single trailing newline terminates the last line rather than starting
    an empty one. Nothing else is stripped.
    """
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return lines


def check_line_count(lines: list[str], count: int) -> None:
    """
    Check that the line split agrees with the length-derived entry count.

    Once every line has passed :func:`decode_hash_line` the two counts
    always agree: ``n`` lines of 64 characters span ``65 * n`` or
    ``65 * n - 1`` bytes, both of which give ``n`` entries. A disagreement
    means the file changed between the read and the size lookup.

    Raises:
        HashFormatError: If the counts differ.
    """
    if len(lines) != count:
        raise HashFormatError(
            f"File has {len(lines)} lines but its length implies {count} entries"
        )


def read_entries(file_path) -> tuple[bytearray, int]:
    """
    Read and decode a transaction id file into an entry buffer.

    The buffer is pre-sized to ``count * 32`` bytes from the file length and
    filled line by line. Decoding stops at the first malformed line.

    The content is decoded as Latin-1, which maps every byte to one
    character, so a non-ASCII byte is reported by :func:`decode_hash_line`
    as a non-hex character of its line rather than failing the whole file.

    Args:
        file_path: Path to the input file.

    Returns:
        A tuple of (data, count): the newly allocated entry buffer and the
        number of entries in it.

    Raises:
        OSError: If the file cannot be opened or read.
        HashFormatError: If a line is malformed or the line count disagrees
            with the file length.
        EmptyInputError: If the file holds no entries.
    """
    with open(file_path, 'rb') as f:
        raw = f.read()
        size = os.fstat(f.fileno()).st_size

    text = raw.decode('latin-1')

    count = entry_count_for_size(size)
    logger.debug("%s: %d bytes, %d entries", file_path, size, count)

    data = bytearray(count * HASH_SIZE)
    lines = split_lines(text)

    for index, line in enumerate(lines):
        entry = decode_hash_line(line, index + 1)
        data[index * HASH_SIZE:(index + 1) * HASH_SIZE] = entry

    check_line_count(lines, count)

    if count == 0:
        raise EmptyInputError(f"No transaction ids in {file_path}")

    return data, count
