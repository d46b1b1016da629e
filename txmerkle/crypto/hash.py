"""
Merkle Node Hash Functions
===========================

This module implements the hash primitives used to build the Merkle root of
a list of transaction ids.

Only one hash function is involved:
- **SHA-256**: every internal node of the tree is the single SHA-256 digest
  of its two children concatenated (``left || right``, 64 bytes of input).

Unlike Bitcoin's block Merkle tree, nodes are hashed exactly once (no double
SHA-256) and the leaves are taken in the byte order in which they appear in
the input file.
"""

import hashlib


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: The raw bytes to hash.

    Returns:
        The 32-byte SHA-256 digest.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_pair(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent node hash of two sibling entries: SHA-256(left || right).

    Args:
        left: The 32-byte left child.
        right: The 32-byte right child.

    Returns:
        The 32-byte parent digest.
    """
    return sha256(left + right)
