"""
Merkle Root of a Transaction ID File
=====================================

Entry point of the library: reads a file of hex transaction ids and returns
its Merkle root as a 64-character lowercase hex string.

The computation is a two-stage pipeline run synchronously on the calling
thread:

1. :func:`txmerkle.core.decoder.read_entries` decodes the file into a packed
   buffer of 32-byte entries and an entry count.
2. :func:`txmerkle.crypto.merkle.reduce_entries` folds that same buffer, in
   place, down to the root.

Nothing is shared between calls; every call owns the buffer it decodes.
"""

from __future__ import annotations

import logging
from typing import Optional

from txmerkle.core.decoder import read_entries
from txmerkle.crypto.merkle import RoundCallback, reduce_entries

logger = logging.getLogger(__name__)


class MerkleRootCalculator:
    """
    Computes Merkle roots of transaction id files.

    The calculator holds no per-file state and can be reused for any number
    of files. An optional ``on_round`` hook observes every reduction round,
    which is how :class:`txmerkle.utils.visualizer.RoundVisualizer` traces a
    computation.

    Usage example:
        >>> calculator = MerkleRootCalculator()
        >>> root = calculator.compute('txids.txt')
    """

    def __init__(self, on_round: Optional[RoundCallback] = None) -> None:
        self.on_round = on_round

    def compute(self, file_path) -> str:
        """
        Compute the Merkle root of the transaction ids in ``file_path``.

        Args:
            file_path: Path to a file with one 64-character hex id per line.

        Returns:
            The Merkle root as a lowercase hex string (64 characters).

        Raises:
            OSError: If the file cannot be read.
            HashFormatError: If the file is malformed.
            EmptyInputError: If the file holds no ids.
        """
        data, count = read_entries(file_path)
        root = reduce_entries(data, count, on_round=self.on_round)
        logger.info("Merkle root of %d entries from %s: %s", count, file_path, root[:16])
        return root


def compute_root(file_path) -> str:
    """
    Compute the Merkle root of a transaction id file.

    Convenience wrapper around :meth:`MerkleRootCalculator.compute` for the
    common case without a round hook.
    """
    return MerkleRootCalculator().compute(file_path)
