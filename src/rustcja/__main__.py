"""CLI entry points for rustcja.

Two console scripts:
- rustc-ja-wrapper <command> [args...]   (RUSTC_WRAPPER-compatible)
- rustc-ja translate | message | phrases  (utilities)
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rustcja import __version__
from rustcja.config import Settings
from rustcja.debuglog import setup_debug_logging
from rustcja.engine.message import translate_message
from rustcja.engine.stream import convert_stream
from rustcja.errors import WrapperError
from rustcja.phrases.table import PhraseTable, get_default_table, load_phrase_table
from rustcja.wrapper import run_wrapped

console = Console()
err_console = Console(stderr=True)

WRAPPER_USAGE = "Usage: rustc-ja-wrapper <command> [args...]"


def _load_table(phrases: Path | None, settings: Settings) -> PhraseTable:
    """Explicit phrase file if given, else the configured default table."""
    if phrases is not None:
        return load_phrase_table(phrases, *settings.extra_phrase_paths)
    return get_default_table(settings)


phrases_option = click.option(
    "--phrases",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Phrase data file (JSON or YAML) instead of the bundled table",
)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.version_option(version=__version__)
@phrases_option
@click.argument("command", required=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def wrapper(phrases: Path | None, command: str | None, args: tuple[str, ...]):
    """Run COMMAND and translate its JSON diagnostics to Japanese.

    Everything after COMMAND is passed to it unchanged. Use as
    RUSTC_WRAPPER to translate cargo's compiler errors.
    """
    if not command:
        err_console.print(WRAPPER_USAGE, markup=False, highlight=False)
        sys.exit(1)

    settings = Settings.from_env()
    setup_debug_logging(settings)
    table = _load_table(phrases, settings)

    try:
        code = run_wrapped(command, args, table)
    except WrapperError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    sys.exit(code)


@click.group()
@click.version_option(version=__version__)
def cli():
    """rustcja - Japanese translations for rustc diagnostics."""
    pass


@cli.command()
@phrases_option
def translate(phrases: Path | None):
    """Translate rustc JSON diagnostics from stdin to stdout.

    Example: rustc --error-format=json main.rs 2>&1 | rustc-ja translate
    """
    settings = Settings.from_env()
    table = _load_table(phrases, settings)

    stdin = click.get_binary_stream("stdin")
    stdout = click.get_binary_stream("stdout")
    for line in convert_stream(stdin, table):
        stdout.write(line)
        stdout.flush()


@cli.command()
@click.argument("text")
@phrases_option
def message(text: str, phrases: Path | None):
    """Translate a single diagnostic message.

    Example: rustc-ja message "borrow of moved value: `s1`"
    """
    settings = Settings.from_env()
    table = _load_table(phrases, settings)
    click.echo(translate_message(text, table))


@cli.command()
@click.option("--search", "-s", default=None, help="Only show entries containing TEXT")
@click.option("--limit", "-n", default=50, help="Maximum rows to show (0 = all)")
@phrases_option
def phrases(search: str | None, limit: int, phrases: Path | None):
    """List phrase entries in match order (longest first)."""
    settings = Settings.from_env()
    table = _load_table(phrases, settings)

    entries = list(enumerate(table, start=1))
    if search:
        needle = search.lower()
        entries = [
            (i, e)
            for i, e in entries
            if needle in e.source_template.lower() or needle in e.target_template
        ]

    if not entries:
        console.print("[yellow]No phrase entries found[/yellow]")
        return

    shown = entries[:limit] if limit > 0 else entries

    out = Table(title=f"Phrase table ({len(table)} entries)")
    out.add_column("#", style="dim", justify="right")
    out.add_column("English", style="cyan")
    out.add_column("日本語", style="green")
    for i, entry in shown:
        out.add_row(str(i), escape(entry.source_template), escape(entry.target_template))

    console.print(out)
    if len(shown) < len(entries):
        console.print(f"[dim]... {len(entries) - len(shown)} more (use --limit 0)[/dim]")


if __name__ == "__main__":
    cli()
