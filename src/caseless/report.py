"""Rendering and JSON persistence of timing results."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import BenchConfig
from .metrics import TimingStats
from .table import default_table

console = Console()


def _fmt(value: float | None) -> str:
    return f"{value:.2f}" if value is not None else "N/A"


def print_timings(stats: list[TimingStats], pairs: int) -> None:
    """Display one row per match mode."""
    table = Table(title="Caseless Match Timings (µs per comparison)")
    table.add_column("Mode", style="bold cyan")
    table.add_column("Matched", justify="right")
    table.add_column("Calls", justify="right")
    table.add_column("Mean", justify="right")
    table.add_column("P50", justify="right")
    table.add_column("P95", justify="right")
    table.add_column("P99", justify="right")

    for s in stats:
        table.add_row(
            s.mode,
            f"{s.matched}/{pairs}",
            str(s.calls),
            _fmt(s.mean_us),
            _fmt(s.p50_us),
            _fmt(s.p95_us),
            _fmt(s.p99_us),
        )

    console.print(table)


def save_timings(stats: list[TimingStats], config: BenchConfig, output_dir: Path) -> Path:
    """Save timing results to a timestamped JSON file."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    filepath = output_dir / f"bench_{timestamp}.json"

    version = default_table().unicode_version
    data = {
        "timestamp": timestamp,
        "unicode_version": ".".join(map(str, version)) if version else None,
        "config": config.model_dump(),
        "results": [s.to_dict() for s in stats],
    }

    filepath.write_text(json.dumps(data, indent=2, ensure_ascii=False))
    console.print(f"  Results saved to [cyan]{filepath}[/]")
    return filepath


def load_timings(filepath: Path) -> dict:
    """Load a saved timing JSON file."""
    return json.loads(Path(filepath).read_text())
