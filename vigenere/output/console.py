"""
Vigenere Console Output
========================

Rich-based console formatters for the Vigenere cryptanalysis toolkit:
transformation summaries, column frequency tables, Kasiski factor
rankings and ranked key candidates.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from smashcore.console import SmashConsole
from vigenere.core.models import (
    ColumnFrequency,
    CrackResult,
    KasiskiResult,
    KeySmashResult,
    TransformResult,
)


def _fmt_score(score: float) -> str:
    return "undefined (no letters)" if math.isinf(score) else f"{score:.4f}"


class VigenereConsoleOutput:
    """Console output formatters for Vigenere analysis results.

    Usage::

        output = VigenereConsoleOutput(SmashConsole())
        output.display_kasiski(kasiski_result)
        output.display_smash(smash_result)
    """

    def __init__(self, console: Optional[SmashConsole] = None) -> None:
        self.console = console or SmashConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Encryption / decryption
    # ------------------------------------------------------------------ #

    def display_transform(self, result: TransformResult) -> None:
        """Show the key and the transformed text."""
        title = result.operation.value.title()
        self.console.section(title)

        body = Text()
        body.append("Key: ", style="bold")
        body.append(f"{result.key!r}\n", style="smash.key")
        body.append("Input: ", style="bold")
        body.append(f"{result.input_text}\n")
        body.append("Output: ", style="bold")
        body.append(result.output_text, style="smash.highlight")
        self._rich.print(Panel(body, title=title, border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Column frequencies
    # ------------------------------------------------------------------ #

    def display_frequencies(
        self, columns: Sequence[ColumnFrequency], top: int = 5
    ) -> None:
        """Show each column's score and its most frequent letters."""
        self.console.section("Column Frequencies")

        tbl = Table(
            title=f"Chi-squared vs. English ({len(columns)} column(s))",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Column", justify="right")
        tbl.add_column("Letters", justify="right")
        tbl.add_column("Chi-squared", justify="right")
        tbl.add_column(f"Top {top} letters")

        for column in columns:
            common = sorted(
                column.proportions.items(), key=lambda item: -item[1]
            )[:top]
            tbl.add_row(
                str(column.column),
                str(column.total),
                _fmt_score(column.score),
                "" if column.degenerate else "  ".join(
                    f"{letter}:{proportion:.3f}" for letter, proportion in common
                ),
            )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Kasiski
    # ------------------------------------------------------------------ #

    def display_kasiski(self, result: KasiskiResult, top: int = 10) -> None:
        """Show repeated substrings summary and the ranked factors."""
        self.console.section("Kasiski Examination")

        summary = Text()
        summary.append("Repeated substrings: ", style="bold")
        summary.append(f"{len(result.substring_table)}\n")
        summary.append("Distinct gaps: ", style="bold")
        summary.append(f"{len(result.factor_table)}\n")
        summary.append("Suggested key length: ", style="bold")
        summary.append(str(result.first_key_length), style="smash.key")
        summary.append(f"  (factors < {result.minimum_key_length} skipped)", style="smash.dim")
        self._rich.print(Panel(summary, title="Summary", border_style="cyan"))

        tbl = Table(
            title="Factor Ranking",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Rank", justify="right")
        tbl.add_column("Factor", justify="right")
        tbl.add_column("Weight", justify="right")
        for rank, candidate in enumerate(result.frequency_ranks[:top], start=1):
            style = "smash.key" if candidate.factor == result.first_key_length else ""
            tbl.add_row(str(rank), str(candidate.factor), str(candidate.frequency), style=style)
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Key recovery
    # ------------------------------------------------------------------ #

    def display_smash(
        self, result: KeySmashResult, assembled: Optional[str] = None
    ) -> None:
        """Show the ranked candidate letters per key column."""
        self.console.section("Key Recovery")

        tbl = Table(
            title=f"Key candidates (length {result.key_length})",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Column", justify="right")
        for rank in range(result.options):
            tbl.add_column(f"#{rank}", justify="center")

        for column, candidates in enumerate(result.candidate_table):
            tbl.add_row(
                str(column),
                *(f"{c.letter} ({_fmt_score(c.score)})" for c in candidates),
            )
        self._rich.print(tbl)
        self.console.success(f"First key: [smash.key]{result.first_key}[/smash.key]")
        if assembled is not None:
            self.console.info(f"Assembled key: [smash.key]{assembled}[/smash.key]")

    def display_crack(self, result: CrackResult) -> None:
        """Show the whole pipeline result."""
        if result.kasiski is not None:
            self.display_kasiski(result.kasiski)
        self.display_smash(result.smash)

        body = Text()
        body.append("Key length: ", style="bold")
        body.append(f"{result.key_length} ({result.key_length_source.value})\n")
        body.append("Key: ", style="bold")
        body.append(f"{result.key}\n", style="smash.key")
        body.append(result.plaintext)
        self._rich.print(Panel(body, title="Decryption", border_style="green"))
