"""
Vigenere CLI
=============

Click-based command-line interface for the Vigenere cryptanalysis
toolkit.  Every subcommand is a thin wrapper over
:class:`vigenere.core.engine.VigenereEngine`.

Usage::

    python -m vigenere encrypt "ATTACK AT DAWN" --key LEMON
    python -m vigenere decrypt "LXFOPV EF RNHR" --key LEMON
    python -m vigenere frequencies CIPHERTEXT --columns 5
    python -m vigenere kasiski CIPHERTEXT
    python -m vigenere smash CIPHERTEXT --length 5 --combination 0,1,0,0,0
    python -m vigenere crack - < ciphertext.txt

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from pydantic import BaseModel

from smashcore.config import SmashConfig
from smashcore.console import SmashConsole

from vigenere import __version__
from vigenere.core.engine import VigenereEngine
from vigenere.core.errors import VigenereError
from vigenere.core.models import AssembledKeyResult, FrequencyResult, Operation
from vigenere.output.console import VigenereConsoleOutput
from vigenere.output.report import VigenereReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (defaults to the configured one).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase log verbosity (-v info, -vv debug).",
)
@click.version_option(__version__, prog_name="vigenere-smash")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    verbose: int,
) -> None:
    """Vigenere Smash -- Kasiski examination and chi-squared key recovery.

    TEXT arguments may be "-" to read from standard input.
    """
    ctx.ensure_object(dict)

    smash_config = SmashConfig.load(config) if config else SmashConfig()
    if verbose:
        smash_config.global_settings.log_level = "DEBUG" if verbose > 1 else "INFO"

    output_format = output or smash_config.vigenere.output_format
    console = SmashConsole(quiet=quiet or output_format == "json")

    ctx.obj["config"] = smash_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["display"] = VigenereConsoleOutput(console)
    ctx.obj["reporter"] = VigenereReportGenerator()

    if not quiet and output_format == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _read_text(text: str) -> str:
    """Return *text*, or standard input when it is ``-``."""
    if text == "-":
        return click.get_text_stream("stdin").read().rstrip("\n")
    return text


def _engine(ctx: click.Context, text: str) -> VigenereEngine:
    return VigenereEngine(_read_text(text), config=ctx.obj["config"])


def _handle_output(ctx: click.Context, result: BaseModel, kind: str) -> bool:
    """Emit *result* as JSON when requested.

    Returns:
        ``True`` if the result was handled here, ``False`` if the caller
        should render it on the console.
    """
    reporter: VigenereReportGenerator = ctx.obj["reporter"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file), kind)
        ctx.obj["console"].success(f"JSON report saved to: {path}")

    if ctx.obj["output_format"] == "json":
        if not output_file:
            click.echo(reporter.to_json(result, kind))
        return True
    return False


def _parse_combination(value: Optional[str]) -> Optional[list[int]]:
    if value is None:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise click.BadParameter(
            "expected comma separated integers, e.g. 0,1,0"
        ) from exc


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("text")
@click.option("--key", "-k", required=True, help="Encryption key.")
@click.pass_context
def encrypt(ctx: click.Context, text: str, key: str) -> None:
    """Encrypt TEXT with a repeating KEY."""
    try:
        result = _engine(ctx, text).transform(Operation.ENCRYPT, key)
    except VigenereError as exc:
        raise click.ClickException(str(exc)) from exc
    if not _handle_output(ctx, result, "encrypt"):
        ctx.obj["display"].display_transform(result)


@cli.command()
@click.argument("text")
@click.option("--key", "-k", required=True, help="Decryption key.")
@click.pass_context
def decrypt(ctx: click.Context, text: str, key: str) -> None:
    """Decrypt TEXT with a repeating KEY."""
    try:
        result = _engine(ctx, text).transform(Operation.DECRYPT, key)
    except VigenereError as exc:
        raise click.ClickException(str(exc)) from exc
    if not _handle_output(ctx, result, "decrypt"):
        ctx.obj["display"].display_transform(result)


@cli.command()
@click.argument("text")
@click.option("--columns", "-n", type=int, default=1, show_default=True,
              help="Number of key columns to partition the text into.")
@click.pass_context
def frequencies(ctx: click.Context, text: str, columns: int) -> None:
    """Letter proportions and chi-squared score per key column."""
    try:
        engine = _engine(ctx, text)
        result = FrequencyResult(
            columns=columns,
            text_length=len(engine.text),
            column_frequencies=engine.frequencies(columns),
        )
    except VigenereError as exc:
        raise click.ClickException(str(exc)) from exc
    if not _handle_output(ctx, result, "frequencies"):
        ctx.obj["display"].display_frequencies(result.column_frequencies)


@cli.command()
@click.argument("text")
@click.option("--min-key-length", type=int, default=None,
              help="Skip ranked factors below this value.")
@click.option("--max-substring", type=int, default=None,
              help="Longest repeated substring length to search (0 = all).")
@click.option("--top", type=int, default=10, show_default=True,
              help="Number of ranked factors to display.")
@click.pass_context
def kasiski(
    ctx: click.Context,
    text: str,
    min_key_length: Optional[int],
    max_substring: Optional[int],
    top: int,
) -> None:
    """Suggest key lengths from repeated substring gaps."""
    settings = ctx.obj["config"].vigenere
    if min_key_length is not None:
        settings.minimum_key_length = min_key_length
    if max_substring is not None:
        settings.max_substring_length = max_substring

    try:
        result = _engine(ctx, text).kasiski_examination()
    except VigenereError as exc:
        raise click.ClickException(str(exc)) from exc
    if not _handle_output(ctx, result, "kasiski"):
        ctx.obj["display"].display_kasiski(result, top=top)


@cli.command()
@click.argument("text")
@click.option("--length", "-l", type=int, default=None,
              help="Key length (Kasiski suggestion if omitted).")
@click.option("--options", "-n", type=int, default=None,
              help="Ranked letters kept per key column (max 26).")
@click.option("--combination", default=None,
              help="Comma separated rank per column to assemble an alternate key.")
@click.pass_context
def smash(
    ctx: click.Context,
    text: str,
    length: Optional[int],
    options: Optional[int],
    combination: Optional[str],
) -> None:
    """Recover the most likely key letters by chi-squared scoring."""
    ranks = _parse_combination(combination)
    try:
        result = _engine(ctx, text).smash_key(length, options)
        if ranks is not None:
            result = AssembledKeyResult.from_smash(result, ranks)
    except VigenereError as exc:
        raise click.ClickException(str(exc)) from exc
    if not _handle_output(ctx, result, "smash"):
        assembled = (
            result.assembled_key if isinstance(result, AssembledKeyResult) else None
        )
        ctx.obj["display"].display_smash(result, assembled)


@cli.command()
@click.argument("text")
@click.option("--length", "-l", type=int, default=None,
              help="Key length (Kasiski suggestion if omitted).")
@click.option("--options", "-n", type=int, default=None,
              help="Ranked letters kept per key column (max 26).")
@click.pass_context
def crack(
    ctx: click.Context,
    text: str,
    length: Optional[int],
    options: Optional[int],
) -> None:
    """Kasiski, key recovery and decryption in one step."""
    try:
        result = _engine(ctx, text).crack(length, options)
    except VigenereError as exc:
        raise click.ClickException(str(exc)) from exc
    if not _handle_output(ctx, result, "crack"):
        ctx.obj["display"].display_crack(result)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Entry point for ``python -m vigenere`` and the console script."""
    cli(obj={})


if __name__ == "__main__":
    main()
