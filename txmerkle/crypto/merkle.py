"""
In-place Merkle Root Reduction
===============================

This module folds a buffer of 32-byte hash entries down to a single Merkle
root by repeated pairwise hashing.

The entries live back to back in one ``bytearray`` with no separators; the
entry at index ``i`` occupies ``data[i * 32:(i + 1) * 32]``. A **round** walks
the currently valid entries in consecutive pairs and writes each parent hash
to the next output slot of the *same* buffer:

    |      1 |  2 |  3 |  4 |  5 |  6 |
    |     12 | 34 | 56 |
    |   1234 | 56 |
    | 123456 |

Odd-count rounds
----------------
When a round has an odd number of entries, the last one has no partner. It
is **copied forward unchanged** into the next round. It is neither hashed
with itself (as Bitcoin does) nor with a zero entry. Every implementation
that must agree on roots has to use the same rule, and this one is applied
in every round, not only at the leaf level (``56`` above is carried from the
second round into the third).

Buffer reuse
------------
The output slot ``to`` advances by one per pair while the source index
``from`` advances by two, so ``to <= from`` at every step and a write never
lands on an entry that is still to be read in the same round. The buffer is
therefore never reallocated; only the logical entry count shrinks, to
``(count + 1) // 2`` after each round. Bytes past the valid prefix are stale
and are never cleared.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from txmerkle.core.errors import EmptyInputError
from .hash import sha256

logger = logging.getLogger(__name__)

HASH_SIZE = 32
"""Size in bytes of one hash entry (a SHA-256 digest)."""

RoundCallback = Callable[[int, bytearray, int], None]
"""Signature of the ``on_round`` hook: (round_number, data, count)."""


def copy_entry(data: bytearray, from_index: int, to_index: int) -> None:
    """
    Copy the entry at ``from_index`` to ``to_index`` inside ``data``.

    Used for the unpaired trailing entry of an odd-count round.
    """
    assert to_index <= from_index, "write cursor overtook read cursor"
    start = from_index * HASH_SIZE
    data[to_index * HASH_SIZE:(to_index + 1) * HASH_SIZE] = data[start:start + HASH_SIZE]


def hash_entries(data: bytearray, from_index: int, to_index: int) -> None:
    """
    Hash the consecutive pair of entries starting at ``from_index``.

    The two entries are hashed as a single 64-byte input and the 32-byte
    digest is written at ``to_index`` of ``data``.
    """
    assert to_index <= from_index, "write cursor overtook read cursor"
    start = from_index * HASH_SIZE
    digest = sha256(data[start:start + 2 * HASH_SIZE])
    data[to_index * HASH_SIZE:(to_index + 1) * HASH_SIZE] = digest


def reduce_round(data: bytearray, count: int) -> int:
    """
    Perform one reduction round over the first ``count`` entries of ``data``.

    Args:
        data: The entry buffer, modified in place.
        count: Number of valid entries at the start of the round.

    Returns:
        The number of valid entries after the round, ``ceil(count / 2)``.
    """
    from_index = 0
    to_index = 0

    while from_index < count:
        # The last entry of an odd round has no partner: carry it forward.
        if from_index + 1 == count:
            copy_entry(data, from_index, to_index)
        else:
            hash_entries(data, from_index, to_index)
        from_index += 2
        to_index += 1

    return (count + 1) // 2


def round_count(count: int) -> int:
    """Return how many rounds it takes to reduce ``count`` entries to one."""
    rounds = 0
    while count > 1:
        count = (count + 1) // 2
        rounds += 1
    return rounds


def reduce_entries(
    data: bytearray,
    count: int,
    on_round: Optional[RoundCallback] = None,
) -> str:
    """
    Reduce ``count`` entries of ``data`` to the Merkle root.

    Rounds are repeated until a single entry is left; that entry is the
    root. A single-entry buffer takes zero rounds and its entry is returned
    unchanged.

    The buffer is mutated in place and its contents are meaningless after
    the call; only the returned root is useful.

    Args:
        data: Contiguous 32-byte entries, at least ``count * 32`` bytes long.
        count: Number of valid entries.
        on_round: Optional hook called after every round with the round
                  number (starting at 1), the buffer and the new count.
                  It must not modify the buffer.

    Returns:
        The Merkle root as a 64-character lowercase hex string.

    Raises:
        EmptyInputError: If ``count`` is less than one.
        ValueError: If ``data`` is too short to hold ``count`` entries.
    """
    if count < 1:
        raise EmptyInputError("Cannot compute a Merkle root of zero entries")

    if len(data) < count * HASH_SIZE:
        raise ValueError(
            f"Buffer of {len(data)} bytes cannot hold {count} entries "
            f"of {HASH_SIZE} bytes"
        )

    logger.debug("Reducing %d entries in %d rounds", count, round_count(count))

    round_number = 0
    while count > 1:
        count = reduce_round(data, count)
        round_number += 1
        if on_round is not None:
            on_round(round_number, data, count)

    return data[0:HASH_SIZE].hex()
