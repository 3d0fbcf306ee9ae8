"""slugstr CLI - Click command definition and main entry point."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import click
import orjson
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from slugstr.characters import add_approximations, locales
from slugstr.slug_string import SlugString
from slugstr.transform import DEFAULT_MAX_BYTES
from slugstr.utf8 import BACKENDS, backend_for

console = Console(stderr=True)


@click.command()
@click.argument("text", nargs=-1)
@click.option("-a", "--ascii", "ascii_only", is_flag=True,
              help="Approximate accented letters and drop non-ASCII")
@click.option("-l", "--locale", default=None,
              help="Approximation override table (e.g. german, spanish)")
@click.option("--max-bytes", default=DEFAULT_MAX_BYTES, type=click.IntRange(min=0),
              help=f"Truncate slugs to this many UTF-8 bytes (default: {DEFAULT_MAX_BYTES})")
@click.option("--approximations", "approximations_path",
              type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None,
              help="JSON file of extra approximations: {locale: {char: replacement}}")
@click.option("--backend", "backend_name", type=click.Choice(sorted(BACKENDS)),
              default="unicodedata", help="UTF-8 support backend")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON array instead of lines")
@click.option("-v", "--verbose", is_flag=True, help="Verbose progress output")
def main(
    text: tuple[str, ...],
    ascii_only: bool,
    locale: str | None,
    max_bytes: int,
    approximations_path: Path | None,
    backend_name: str,
    as_json: bool,
    verbose: bool,
):
    """Convert text to URL-safe slugs.

    Each TEXT argument is printed as a slug on its own line. Without TEXT,
    lines are read from stdin as raw bytes, so Latin-1/CP1252 input is
    repaired before slugging.

    \b
    Examples:
        slugstr "Hello, World!"                  # hello-world
        slugstr -a "Łódź, Poland"                # lodz-poland
        slugstr -a -l german "Jürgen Müller"     # juergen-mueller
        cat titles.txt | slugstr --ascii --json
    """
    if approximations_path:
        _load_approximations(approximations_path, verbose)

    if locale and locale not in locales():
        console.print(f"[yellow]Unknown locale {escape(repr(locale))}, using default approximations[/yellow]")

    backend = backend_for(backend_name)

    if verbose:
        mode_label = "ascii" if ascii_only else "unicode"
        if ascii_only and locale:
            mode_label += f" ({locale})"
        console.print(Panel(
            f"[bold]slugstr - Text to Slug[/bold]\nMode: {mode_label}\n"
            f"Max bytes: {max_bytes}\nBackend: {backend.name}",
            expand=False,
        ))

    sources = text or _read_stdin_lines()
    results = []
    for source in sources:
        value = SlugString(source, backend=backend)
        slug = str(value.normalize(ascii_only, locale=locale, max_bytes=max_bytes))
        if verbose:
            console.print(f"  [dim]{escape(str(value))} -> {escape(slug)}[/dim]")
        if as_json:
            results.append({"input": str(value), "slug": slug})
        else:
            click.echo(slug)

    if as_json:
        click.echo(orjson.dumps(results, option=orjson.OPT_INDENT_2).decode("utf-8"))

    if verbose:
        console.print(f"[green]Slugged:[/green] {len(sources)} inputs")


def _read_stdin_lines() -> list[bytes]:
    """Read raw lines from stdin, warning about ones that need repair."""
    lines = list(_iter_lines(click.get_binary_stream("stdin")))
    for number, line in enumerate(lines, 1):
        if not _is_utf8(line):
            console.print(
                f"[yellow]Line {number} is not valid UTF-8, repairing as CP1252[/yellow]",
            )
    return lines


def _iter_lines(stream) -> Iterator[bytes]:
    for raw in stream:
        line = raw.rstrip(b"\r\n")
        if line.strip():
            yield line


def _is_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def _load_approximations(path: Path, verbose: bool) -> None:
    """Register approximation tables from a JSON file."""
    try:
        tables = orjson.loads(path.read_bytes())
    except orjson.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {path}: {e}")

    if not isinstance(tables, dict) or not all(isinstance(t, dict) for t in tables.values()):
        raise click.ClickException(
            f"{path} must map locale names to objects of character replacements",
        )

    for name, mapping in tables.items():
        try:
            add_approximations(name, mapping)
        except (ValueError, TypeError) as e:
            raise click.ClickException(f"Bad approximation for {name!r} in {path}: {e}")
        if verbose:
            console.print(f"[dim]Registered {len(mapping)} approximations for {name}[/dim]")
