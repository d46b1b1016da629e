"""
Merkle Reduction Round Visualizer
==================================

Prints a rich, colorful trace of a Merkle root computation using the
``rich`` library: one table row per round with the number of surviving
entries and their (truncated) hashes, followed by a panel with the root.

The visualizer is read-only. It hooks into the reducer through the
``on_round`` callback and copies the hex of each valid entry out of the
buffer; it never writes to the buffer.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from txmerkle.core.decoder import read_entries
from txmerkle.crypto.merkle import HASH_SIZE, reduce_entries

logger = logging.getLogger(__name__)


def _truncate_hash(h: str, length: int = 16) -> str:
    """Return the first *length* characters of a hex hash."""
    return h[:length]


class RoundVisualizer:
    """
    Rich CLI visualizer for the rounds of a Merkle reduction.

    Attributes:
        console: A ``rich.console.Console`` used for all output.
        rounds: Recorded rounds as (round_number, [entry_hex, ...]) tuples,
                starting with round 0 for the leaves.
        max_entries: Maximum number of entries shown per row.
    """

    def __init__(self, console: Console | None = None, max_entries: int = 8) -> None:
        self.console = console if console is not None else Console()
        self.max_entries = max_entries
        self.rounds: list[tuple[int, list[str]]] = []

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    @staticmethod
    def _snapshot(data: bytearray, count: int) -> list[str]:
        return [
            data[i * HASH_SIZE:(i + 1) * HASH_SIZE].hex()
            for i in range(count)
        ]

    def record_leaves(self, data: bytearray, count: int) -> None:
        """Record the leaf entries as round 0."""
        self.rounds = [(0, self._snapshot(data, count))]

    def on_round(self, round_number: int, data: bytearray, count: int) -> None:
        """Reducer hook: record the entries that survived ``round_number``."""
        self.rounds.append((round_number, self._snapshot(data, count)))

    def trace(self, file_path) -> str:
        """
        Compute the Merkle root of ``file_path`` while recording each round.

        Returns:
            The Merkle root as a lowercase hex string.
        """
        data, count = read_entries(file_path)
        self.record_leaves(data, count)
        root = reduce_entries(data, count, on_round=self.on_round)
        logger.debug("Traced %d rounds for %s", len(self.rounds) - 1, file_path)
        return root

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def print_rounds(self) -> None:
        """Print the recorded rounds as a rich table."""
        if not self.rounds:
            self.console.print("[yellow]No rounds recorded.[/yellow]")
            return

        table = Table(
            title="Merkle Rounds",
            show_header=True,
            header_style="bold cyan",
            border_style="blue",
        )
        table.add_column("Round", style="bold white", justify="right")
        table.add_column("Entries", justify="right", style="magenta")
        table.add_column("Hashes", style="green")

        for round_number, entries in self.rounds:
            shown = [_truncate_hash(h) for h in entries[:self.max_entries]]
            if len(entries) > self.max_entries:
                shown.append(f"... (+{len(entries) - self.max_entries})")
            table.add_row(str(round_number), str(len(entries)), " ".join(shown))

        self.console.print(table)

    def print_root(self, root: str) -> None:
        """Print the final root in a panel."""
        panel = Panel(
            f"[bold]Merkle Root:[/bold] {root}",
            title="Result",
            border_style="cyan",
        )
        self.console.print(panel)
