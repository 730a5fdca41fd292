"""
SmashCore Console Interface
============================

Rich-powered console abstraction providing a unified presentation layer
for the toolkit's command-line front ends.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, status messages, all with consistent
styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

_SMASH_THEME = Theme(
    {
        "smash.banner": "bold bright_cyan",
        "smash.section": "bold bright_magenta",
        "smash.success": "bold green",
        "smash.info": "bold bright_blue",
        "smash.dim": "dim white",
        "smash.highlight": "bold bright_white",
        "smash.key": "bold bright_green",
    }
)

_BANNER_ART = r"""
[bright_cyan] __   ___
 \ \ / (_)__ _ ___ _ _  ___ _ _ ___
  \ V /| / _` / -_) ' \/ -_) '_/ -_)
   \_/ |_\__, \___|_||_\___|_| \___|
         |___/[/bright_cyan][bright_magenta]  S M A S H[/bright_magenta]"""

_TAGLINE = "Kasiski examination & chi-squared key recovery"


class SmashConsole:
    """Unified console interface for the toolkit.

    Usage::

        con = SmashConsole()
        con.banner()
        con.section("Kasiski Examination")
        con.success("Key recovered")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (JSON mode).
        """
        self._console = Console(
            theme=_SMASH_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[smash.highlight]{_TAGLINE}[/smash.highlight]\n"
            f"[smash.dim]Version: {version}  |  {now}[/smash.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="smash.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[smash.success][✔] SUCCESS:[/smash.success] {message}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[smash.info][ℹ] INFO:[/smash.info] {message}"
        )

