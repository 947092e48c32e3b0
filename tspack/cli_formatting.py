"""Rich CLI formatting helpers for tspack commands."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console()


def setup_logging(verbose: bool = False):
    """Route tspack log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def print_error(message: str):
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_pack_results(n_samples: int, n_ranges: int, strategies: str,
                       window_us: int, epsilon: float, output: str):
    """Print pack results as a rich table."""
    ratio = n_samples / max(n_ranges, 1)
    table = Table(title="Pack Results", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Samples", f"{n_samples:,}")
    table.add_row("Ranges", f"{n_ranges:,}")
    table.add_row("Samples/range", f"[green]{ratio:.1f}x[/green]")
    table.add_row("Strategies", strategies or "(none)")
    table.add_row("Window", f"{window_us:,} us")
    table.add_row("Epsilon", f"{epsilon:g}")
    table.add_row("Output", output)
    console.print(table)


def print_unpack_results(n_ranges: int, n_samples: int, output: str):
    """Print unpack results."""
    table = Table(title="Unpack Results", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Ranges", f"{n_ranges:,}")
    table.add_row("Samples", f"{n_samples:,}")
    table.add_row("Output", output)
    console.print(table)


def print_comparison(results: dict):
    """Print per-strategy metrics from compare_strategies()."""
    table = Table(title="Strategy Comparison", border_style="cyan", padding=(0, 2))
    table.add_column("Strategy", style="bold")
    table.add_column("Ranges", justify="right")
    table.add_column("Ratio", justify="right", style="green")
    table.add_column("RMSE", justify="right")
    table.add_column("Max Error", justify="right", style="dim")

    for name, stats in results.items():
        table.add_row(
            name,
            f"{stats['n_ranges']:,}",
            f"{stats['ratio']:.2f}x",
            f"{stats['rmse']:.6g}",
            f"{stats['max_error']:.6g}",
        )

    console.print()
    console.print(table)
