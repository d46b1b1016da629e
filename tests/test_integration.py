"""
Integration Tests
==================

End-to-end tests that exercise the full pipeline:
- Write a transaction id file -> decode -> reduce -> hex root

Expected roots are computed independently with hashlib.
"""

import hashlib

import pytest

from examples.helpers.fixtures import random_hashes, write_hash_file
from txmerkle.core.errors import EmptyInputError, HashFormatError
from txmerkle.core.root import MerkleRootCalculator, compute_root


def node(left_hex: str, right_hex: str) -> str:
    """Helper: hex of SHA-256 over two hex-encoded children."""
    return hashlib.sha256(bytes.fromhex(left_hex) + bytes.fromhex(right_hex)).hexdigest()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def hashes():
    """Six reproducible leaf hashes, A..F."""
    return random_hashes(6, seed=2024)


@pytest.fixture
def write(tmp_path):
    """Factory writing a list of hashes to a fresh file."""
    counter = {"n": 0}

    def _write(lines, trailing_newline=True):
        counter["n"] += 1
        path = tmp_path / f"input-{counter['n']}.txt"
        write_hash_file(path, lines, trailing_newline=trailing_newline)
        return path

    return _write


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

class TestComputeRoot:
    """End-to-end scenarios for compute_root."""

    def test_single_line_is_root(self, write, hashes):
        assert compute_root(write(hashes[:1])) == hashes[0]

    def test_single_uppercase_line_is_lowercased(self, write, hashes):
        assert compute_root(write([hashes[0].upper()])) == hashes[0]

    def test_two_lines(self, write, hashes):
        a, b = hashes[:2]
        assert compute_root(write([a, b])) == node(a, b)

    def test_three_lines(self, write, hashes):
        a, b, c = hashes[:3]
        assert compute_root(write([a, b, c])) == node(node(a, b), c)

    def test_six_lines(self, write, hashes):
        a, b, c, d, e, f = hashes
        expected = node(node(node(a, b), node(c, d)), node(e, f))
        assert compute_root(write(hashes)) == expected

    def test_five_lines_carry_forward_twice(self, write, hashes):
        """[1..5] -> [12, 34, 5] -> [1234, 5] -> [12345]"""
        a, b, c, d, e = hashes[:5]
        expected = node(node(node(a, b), node(c, d)), e)
        assert compute_root(write(hashes[:5])) == expected

    def test_no_trailing_newline_same_root(self, write, hashes):
        with_eol = compute_root(write(hashes))
        without_eol = compute_root(write(hashes, trailing_newline=False))
        assert with_eol == without_eol

    def test_mixed_case_same_root(self, write, hashes):
        upper = [x.upper() for x in hashes]
        assert compute_root(write(upper)) == compute_root(write(hashes))

    def test_deterministic(self, write):
        lines = random_hashes(37, seed=5)
        path = write(lines)
        assert compute_root(path) == compute_root(path)
        assert compute_root(path) == compute_root(write(lines))

    def test_order_matters(self, write, hashes):
        assert compute_root(write(hashes)) != compute_root(write(hashes[::-1]))

    def test_large_file(self, write):
        lines = random_hashes(1001, seed=9)
        root = compute_root(write(lines))
        assert len(root) == 64
        assert root == root.lower()

    def test_malformed_line(self, write, hashes):
        with pytest.raises(HashFormatError):
            compute_root(write([hashes[0], hashes[1][:63]]))

    def test_empty_file(self, write):
        with pytest.raises(EmptyInputError):
            compute_root(write([]))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            compute_root(tmp_path / "nope.txt")


class TestMerkleRootCalculator:
    """Tests for the reusable calculator."""

    def test_matches_compute_root(self, write, hashes):
        path = write(hashes)
        assert MerkleRootCalculator().compute(path) == compute_root(path)

    def test_reusable_across_files(self, write, hashes):
        calculator = MerkleRootCalculator()
        assert calculator.compute(write(hashes[:1])) == hashes[0]
        assert calculator.compute(write(hashes[:2])) == node(hashes[0], hashes[1])

    def test_on_round_hook(self, write, hashes):
        counts = []
        calculator = MerkleRootCalculator(on_round=lambda n, data, count: counts.append(count))
        calculator.compute(write(hashes))
        assert counts == [3, 2, 1]
