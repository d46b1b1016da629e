"""
Example 01: Compute a Merkle Root
==================================

Reads a file of transaction ids (one 64-character hex hash per line) and
prints its Merkle root.

On success the root is printed alone on stdout. On failure a descriptive
message is printed to stderr and the script exits with status 1.

Usage:
    python examples/01_compute_root.py <txids.txt> [-v]
"""

import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from txmerkle.core.errors import MerkleError
from txmerkle.core.root import compute_root


def main():
    args = sys.argv[1:]

    if "-v" in args:
        args.remove("-v")
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if len(args) != 1:
        print("Usage: 01_compute_root.py <txids.txt> [-v]", file=sys.stderr)
        sys.exit(1)

    file_path = args[0]
    try:
        root = compute_root(file_path)
    except OSError as e:
        print(f"Cannot read {file_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except MerkleError as e:
        print(f"Invalid input {file_path}: {e}", file=sys.stderr)
        sys.exit(1)

    print(root)


if __name__ == "__main__":
    main()
