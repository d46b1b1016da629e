"""
Transaction ID Fixture Helpers
===============================

Helpers for writing transaction id files in the one-hash-per-line format
read by :func:`txmerkle.core.root.compute_root`.

Used by the example scripts to generate benchmark inputs and by the tests
to build files with known content.

Usage:
    from examples.helpers.fixtures import random_hashes, write_hash_file

    hashes = random_hashes(1000, seed=7)
    write_hash_file("txids.txt", hashes)
"""

from __future__ import annotations

import hashlib
import random


def random_hashes(count: int, seed: int = 0) -> list[str]:
    """
    Generate ``count`` reproducible 64-character hex hashes.

    Each hash is the SHA-256 of a random 32-byte value drawn from a
    generator seeded with ``seed``.
    """
    rng = random.Random(seed)
    return [
        hashlib.sha256(rng.getrandbits(256).to_bytes(32, 'big')).hexdigest()
        for _ in range(count)
    ]


def write_hash_file(path, hashes: list[str], trailing_newline: bool = True) -> None:
    """
    Write ``hashes`` to ``path``, one per line, separated by ``\\n``.

    Args:
        path: Destination file path.
        hashes: Hex strings to write, in order.
        trailing_newline: Whether the last line ends with ``\\n``.
    """
    content = "\n".join(hashes)
    if trailing_newline and hashes:
        content += "\n"
    with open(path, "w", newline="\n") as f:
        f.write(content)
