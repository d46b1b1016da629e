"""
Example 03: Benchmark
======================

Times :func:`compute_root` on a generated file of random transaction ids.

The file is written once to a temporary directory; each timed iteration
then reads, decodes and reduces it from scratch.

Usage:
    python examples/03_benchmark.py [num_hashes] [iterations]
"""

import os
import sys
import tempfile
import time

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from txmerkle.core.root import compute_root
from examples.helpers.fixtures import random_hashes, write_hash_file


def main():
    num_hashes = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000
    iterations = int(sys.argv[2]) if len(sys.argv) > 2 else 10

    print("=" * 60)
    print(f"Merkle root benchmark: {num_hashes:,} hashes, {iterations} iterations")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        file_path = os.path.join(tmp, "input-perf.txt")
        write_hash_file(file_path, random_hashes(num_hashes, seed=42))

        timings = []
        root = None
        for _ in range(iterations):
            start = time.perf_counter()
            root = compute_root(file_path)
            timings.append(time.perf_counter() - start)

    best = min(timings)
    mean = sum(timings) / len(timings)
    print(f"  Root:  {root}")
    print(f"  Best:  {best * 1000:.2f} ms")
    print(f"  Mean:  {mean * 1000:.2f} ms")
    print(f"  Rate:  {num_hashes / best:,.0f} hashes/s")


if __name__ == "__main__":
    main()
