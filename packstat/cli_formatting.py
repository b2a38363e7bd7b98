"""Rich CLI formatting helpers for packstat commands."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

console = Console()
err_console = Console(stderr=True)


def print_header(title: str):
    """Print a styled section header."""
    console.print(Panel(Text(title, style="bold cyan"), border_style="dim"))


def print_error(message: str):
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_summary(result, input_path: str, output_path: str = None):
    """Print run counters as a two-column table."""
    table = Table(title="Analysis", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Input", input_path)
    table.add_row("Bytes read", f"{result.n_bytes:,}")
    table.add_row("Values", f"{result.n_values:,}")
    table.add_row("K", str(result.k))
    if result.discarded_bits:
        table.add_row("Discarded", f"[yellow]{result.discarded_bits} trailing bits[/yellow]")
    if output_path is not None:
        table.add_row("Output", output_path)
    console.print(table)


def print_values(result):
    """Print the top-K and last-K readouts side by side."""
    table = Table(border_style="cyan", padding=(0, 1))
    table.add_column("#", justify="right", style="dim")
    table.add_column(f"Sorted max {result.k}", justify="right", style="green")
    table.add_column(f"Last {result.k}", justify="right")
    for i in range(max(len(result.top), len(result.last))):
        top = str(result.top[i]) if i < len(result.top) else ""
        last = str(result.last[i]) if i < len(result.last) else ""
        table.add_row(str(i), top, last)
    console.print(table)


def print_comparison(expected, actual, label: str):
    """Print a per-row diff of one report section; returns True on match."""
    if expected == actual:
        console.print(f"  [green]match[/green]  {label} ({len(actual)} values)")
        return True
    table = Table(title=f"{label}: mismatch", border_style="red", padding=(0, 1))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expected", justify="right")
    table.add_column("Actual", justify="right")
    for i in range(max(len(expected), len(actual))):
        e = str(expected[i]) if i < len(expected) else "-"
        a = str(actual[i]) if i < len(actual) else "-"
        style = "" if e == a else "bold red"
        table.add_row(str(i), e, a, style=style)
    console.print(table)
    return False
