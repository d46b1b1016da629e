"""
Hex encoding utilities for hash entries.

Each line of an input file carries one 32-byte transaction id written as 64
hexadecimal characters. Decoding is strict: the line must have exactly 64
characters, all of them hex digits (either case). Nothing is trimmed, so
spaces, tabs and a carriage return left over from a ``\\r\\n`` line ending
are all rejected as non-hex characters.
"""

from txmerkle.core.errors import HashFormatError

HEX_LINE_LENGTH = 64
"""Number of hex characters that encode one 32-byte hash."""

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hex string.

    Example:
        >>> bytes_to_hex(b'\\xab\\xcd')
        'abcd'
    """
    return data.hex()


def decode_hash_line(line: str, line_number: int) -> bytes:
    """
    Decode one line of the input file into a 32-byte hash.

    ``bytes.fromhex`` alone is too lenient for this format (it skips
    whitespace), so the characters are validated first.

    Args:
        line: The line content, without its terminating newline.
        line_number: 1-based position of the line, used in error messages.

    Returns:
        The 32 decoded bytes.

    Raises:
        HashFormatError: If the line is not exactly 64 hex characters.

    Example:
        >>> decode_hash_line('AB' * 32, 1) == b'\\xab' * 32
        True
    """
    if len(line) != HEX_LINE_LENGTH:
        raise HashFormatError(
            f"expected {HEX_LINE_LENGTH} hex characters, got {len(line)}",
            line_number,
        )

    for position, char in enumerate(line, start=1):
        if char not in HEX_DIGITS:
            raise HashFormatError(
                f"non-hex character {char!r} at column {position}",
                line_number,
            )

    return bytes.fromhex(line)
