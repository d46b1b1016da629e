"""
Example 02: Show the Reduction Rounds
======================================

Computes the Merkle root of a transaction id file and prints every round of
the reduction as a rich table: how many entries survive each round and
which hashes they are. With an odd number of entries, the last hash of the
round shows up unchanged in the next one.

Usage:
    python examples/02_show_rounds.py <txids.txt>
    python examples/02_show_rounds.py --demo
"""

import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from txmerkle.core.errors import MerkleError
from txmerkle.utils.visualizer import RoundVisualizer
from examples.helpers.fixtures import random_hashes, write_hash_file


def main():
    args = sys.argv[1:]

    if not args:
        print("Usage: 02_show_rounds.py <txids.txt> | --demo", file=sys.stderr)
        sys.exit(1)

    visualizer = RoundVisualizer()

    if args[0] == "--demo":
        # Six leaves: the third round carries "56" forward unhashed.
        with tempfile.TemporaryDirectory() as tmp:
            file_path = os.path.join(tmp, "demo.txt")
            write_hash_file(file_path, random_hashes(6))
            root = visualizer.trace(file_path)
    else:
        try:
            root = visualizer.trace(args[0])
        except (OSError, MerkleError) as e:
            visualizer.console.print(f"[red]{e}[/red]")
            sys.exit(1)

    visualizer.print_rounds()
    visualizer.print_root(root)


if __name__ == "__main__":
    main()
