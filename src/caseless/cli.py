"""Click CLI entry point."""

from __future__ import annotations

import codecs
import unicodedata
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .config import BenchConfig, FoldingOptions
from .errors import MalformedTextError
from .folding import fold
from .table import MAX_CODE_POINT, default_table
from .text import ensure_text

console = Console()

MODES = ("default", "canonical", "compatibility")


def _options(ctx: click.Context) -> FoldingOptions:
    return ctx.obj["options"]


def _text_or_exit(value: str | bytes, encoding: str = "utf-8") -> str:
    try:
        return ensure_text(value, encoding)
    except MalformedTextError as e:
        console.print(f"[red]Invalid text:[/] {e}")
        raise SystemExit(1)


def _parse_codepoint(value: str) -> int:
    """Accept ``U+1E9E``, ``0x1E9E``, ``1E9E`` or a single literal character."""
    if len(value) == 1:
        return ord(value)
    digits = value
    for prefix in ("U+", "u+", "0x", "0X"):
        if value.startswith(prefix):
            digits = value[len(prefix):]
            break
    try:
        cp = int(digits, 16)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a code point", param_hint="CODEPOINT")
    if not 0 <= cp <= MAX_CODE_POINT:
        raise click.BadParameter(f"{value!r} is outside the Unicode range", param_hint="CODEPOINT")
    return cp


def _fmt_codepoints(cps) -> str:
    return " ".join(f"U+{cp:04X}" for cp in cps)


@click.group()
@click.option("--simple", is_flag=True, help="Simple folding only (no multi-character mappings).")
@click.option("--turkic", is_flag=True, help="Apply the Turkic dotted/dotless I mappings.")
@click.pass_context
def cli(ctx: click.Context, simple: bool, turkic: bool) -> None:
    """Caseless: Unicode case folding and caseless matching."""
    ctx.ensure_object(dict)
    ctx.obj["options"] = FoldingOptions(use_full_mapping=not simple, use_turkic_mapping=turkic)


@cli.command("fold")
@click.argument("text", required=False)
@click.option("--input", "input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Read the text from a file instead.")
@click.option("--encoding", default="utf-8", help="Encoding of --input (default: utf-8).")
@click.option("--codepoints", is_flag=True, help="Print U+XXXX code points instead of text.")
@click.pass_context
def fold_cmd(ctx: click.Context, text: str | None, input_path: Path | None, encoding: str, codepoints: bool) -> None:
    """Print the case-folded form of TEXT."""
    if (text is None) == (input_path is None):
        raise click.UsageError("Give exactly one of TEXT or --input.")
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise click.BadParameter(f"unknown encoding {encoding!r}", param_hint="--encoding")

    source = _text_or_exit(input_path.read_bytes() if input_path else text, encoding)
    folded = fold(source, _options(ctx))
    if codepoints:
        click.echo(_fmt_codepoints(map(ord, folded)))
    else:
        click.echo(folded, nl=input_path is None)


@cli.command()
@click.argument("a")
@click.argument("b")
@click.option("--mode", type=click.Choice([*MODES, "all"]), default="default", show_default=True,
              help="Match mode to apply.")
@click.pass_context
def match(ctx: click.Context, a: str, b: str, mode: str) -> None:
    """Compare A and B caselessly; exit status 1 when they differ."""
    from .matching import caseless_match

    a = _text_or_exit(a)
    b = _text_or_exit(b)
    modes = MODES if mode == "all" else (mode,)

    all_matched = True
    for m in modes:
        matched = caseless_match(a, b, m, _options(ctx))
        all_matched = all_matched and matched
        verdict = "[green]match[/]" if matched else "[red]no match[/]"
        console.print(f"{m}: {verdict}")

    if not all_matched:
        raise SystemExit(1)


@cli.command()
@click.argument("codepoints", nargs=-1, required=True)
def lookup(codepoints: tuple[str, ...]) -> None:
    """Show the table rows and resolved folding of each CODEPOINT."""
    table = default_table()
    combos = [
        ("full", FoldingOptions()),
        ("simple", FoldingOptions(use_full_mapping=False)),
        ("turkic", FoldingOptions(use_turkic_mapping=True)),
        ("simple+turkic", FoldingOptions(use_full_mapping=False, use_turkic_mapping=True)),
    ]

    out = Table(title="Case Folding Lookup")
    out.add_column("Code point", style="bold cyan")
    out.add_column("Name")
    out.add_column("Rows")
    for label, _ in combos:
        out.add_column(label.capitalize())

    for value in codepoints:
        cp = _parse_codepoint(value)
        rows = "; ".join(
            f"{e.status.value}: {_fmt_codepoints(e.mapping)}" for e in table.entries_for(cp)
        ) or "-"
        out.add_row(
            f"U+{cp:04X}",
            unicodedata.name(chr(cp), "<unnamed>"),
            rows,
            *[_fmt_codepoints(table.lookup(cp, opts)) for _, opts in combos],
        )

    console.print(out)


@cli.command()
def info() -> None:
    """Show the data version, entry counts and match modes."""
    from .matching import list_matchers
    from .normalization import DEFAULT_NORMALIZER

    table = default_table()
    version = ".".join(map(str, table.unicode_version)) if table.unicode_version else "unknown"
    console.print(f"Case folding data: Unicode [bold]{version}[/] ({len(table)} code points)")
    console.print(f"Normalization: unicodedata {DEFAULT_NORMALIZER.unicode_version}")
    if version != DEFAULT_NORMALIZER.unicode_version:
        console.print(
            f"[yellow]Warning:[/] case folding data ({version}) differs from unicodedata "
            f"({DEFAULT_NORMALIZER.unicode_version}); characters cased only in the newer "
            "version fold to themselves."
        )

    counts = Table(title="Entries by Status")
    counts.add_column("Status", style="bold cyan")
    counts.add_column("Count", justify="right")
    for status, count in table.status_counts().items():
        counts.add_row(f"{status.value} ({status.name.lower()})", str(count))
    console.print(counts)

    modes = Table(title="Match Modes")
    modes.add_column("Name", style="bold cyan")
    modes.add_column("Key")
    for m in list_matchers():
        modes.add_row(m["name"], m["description"])
    console.print(modes)


@cli.command()
@click.option("--pair", "pairs", type=(str, str), multiple=True, help="A pair of strings to compare (repeatable).")
@click.option("--mode", "modes", type=click.Choice(MODES), multiple=True, help="Restrict to these modes.")
@click.option("--iterations", default=1000, type=int, help="Timed calls per pair and mode.")
@click.option("--warmup", default=10, type=int, help="Untimed calls per pair and mode.")
@click.option("--output-dir", default=None, type=click.Path(file_okay=False, path_type=Path),
              help="Also save results as JSON in this directory.")
@click.pass_context
def bench(
    ctx: click.Context,
    pairs: tuple[tuple[str, str], ...],
    modes: tuple[str, ...],
    iterations: int,
    warmup: int,
    output_dir: Path | None,
) -> None:
    """Time the match modes over sample string pairs."""
    from pydantic import ValidationError

    from .metrics import DEFAULT_BENCH_PAIRS, run_bench
    from .report import print_timings, save_timings

    try:
        config = BenchConfig(
            iterations=iterations,
            warmup=warmup,
            modes=list(modes or MODES),
            options=_options(ctx),
        )
    except ValidationError as e:
        raise click.UsageError(str(e))

    samples = [(_text_or_exit(a), _text_or_exit(b)) for a, b in pairs] or DEFAULT_BENCH_PAIRS
    console.print(f"[bold blue]Timing[/] {len(samples)} pairs x {config.iterations} iterations")

    stats = run_bench(samples, config)
    print_timings(stats, len(samples))
    if output_dir is not None:
        save_timings(stats, config, output_dir)
