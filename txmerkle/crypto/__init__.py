# Hash primitives and the in-place Merkle reduction

from .hash import sha256, hash_pair
from .merkle import HASH_SIZE, copy_entry, hash_entries, reduce_round, reduce_entries, round_count

__all__ = [
    # Hash functions
    'sha256',
    'hash_pair',
    # Merkle reduction
    'HASH_SIZE',
    'copy_entry',
    'hash_entries',
    'reduce_round',
    'reduce_entries',
    'round_count',
]
