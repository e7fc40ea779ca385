"""Rich rendering of hexagrams, search results, sequence analyses and readings."""

from __future__ import annotations

from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from iching.hexagrams import Hexagram
from iching.reading import Reading
from iching.search import HexagramAnalysis, Path, count_line_changes, path_length, path_numbers
from iching.sequence import SequenceAnalysis

console = Console()

YANG = "━━━━━━━"
YIN = "━━   ━━"


def format_lines(lines: Sequence, changing: Optional[Sequence[int]] = None) -> List[str]:
    """Format lines for display, top line first."""
    out = []
    for i in range(len(lines) - 1, -1, -1):
        line = YANG if int(lines[i]) == 1 else YIN
        if changing and i in changing:
            line += " ✦"  # changing line
        out.append(line)
    return out


def hexagram_block(hexagram: Hexagram, changing: Optional[Sequence[int]] = None) -> str:
    return "\n".join([
        f"[bold]Hexagram #{hexagram.number}:[/bold] {hexagram.name} {hexagram.chinese}",
        *format_lines(hexagram.lines, changing),
    ])


# === Search results ===
def print_shortest_paths(start: int, end: int, paths: Sequence[Path], out: Optional[Console] = None) -> None:
    """Prints every path from ``start`` to ``end``, one panel per path."""
    out = out or console
    for n, path in enumerate(paths, start=1):
        steps = []
        for i, (hexagram, op) in enumerate(path):
            if i:
                steps.append("")
                steps.append(f"[yellow]↓ {op}[/yellow] [dim]{op.description}[/dim]")
            steps.append(hexagram_block(hexagram))
        title = (
            f"[bold]Path #{n} from hexagram {start} to hexagram {end}[/bold] "
            f"[dim]({path_length(path)} op(s), {count_line_changes(path)} line change(s))[/dim]"
        )
        route = " → ".join(
            f"#{number}" if i == 0 else f"{label} #{number}"
            for i, (number, label) in enumerate(path_numbers(path))
        )
        out.print(Panel("\n".join(steps), title=title, subtitle=f"[dim]{route}[/dim]", border_style="cyan"))


def print_search_result(start: int, end: int, paths: Sequence[Path], out: Optional[Console] = None) -> None:
    out = out or console
    out.rule(f"[bold cyan]Shortest paths {start} → {end}[/bold cyan]")
    out.print(f"Shortest path search found [bold]{len(paths)}[/bold] path(s)")
    print_shortest_paths(start, end, paths, out)


# === Sequence analyses ===
def info_table(analyses: Sequence[SequenceAnalysis], titles: Sequence[str], title: str) -> Table:
    t = Table(title=title)
    t.add_column("Statistic", style="bold white", no_wrap=True)
    for name in titles:
        t.add_column(name, justify="right", style="cyan")
    t.add_row("Total operations", *(str(a.total_ops) for a in analyses))
    t.add_row("Total line changes", *(str(a.total_line_changes) for a in analyses))
    t.add_row("Lines changed per operation", *(f"{a.lines_per_operation:.3f}" for a in analyses))
    t.add_row("Total paths", *(str(a.total_paths) for a in analyses))
    return t


def print_sequence_analysis(analysis: SequenceAnalysis, show_paths: bool = False,
                            out: Optional[Console] = None) -> None:
    out = out or console
    out.rule("[bold cyan]Analysis of sequence of hexagrams[/bold cyan]")
    out.print(f"[dim]Sequence:[/dim] {analysis.sequence}")
    out.print(info_table([analysis], ["Value"], "Sequence statistics"))

    if show_paths:
        out.print("[bold]Shortest paths between each pair of hexagrams:[/bold]")
        for start, end, paths in analysis.pairs():
            print_shortest_paths(start, end, paths, out)


def print_comparison(first: SequenceAnalysis, second: SequenceAnalysis,
                     titles: Sequence[str] = ("King Wen", "Random"),
                     out: Optional[Console] = None) -> None:
    out = out or console
    out.rule("[bold cyan]Comparison of sequence analyses[/bold cyan]")
    for name, analysis in zip(titles, (first, second)):
        out.print(f"[dim]{name}:[/dim] {analysis.sequence}")
    out.print(info_table([first, second], titles, "Sequence statistics"))


# === Single hexagram ===
def print_hexagram_analysis(analysis: HexagramAnalysis, out: Optional[Console] = None) -> None:
    out = out or console
    out.rule(f"[bold cyan]Analysis of hexagram {analysis.hexagram.number}[/bold cyan]")
    out.print(Panel(hexagram_block(analysis.hexagram), title="[bold]Hexagram[/bold]", border_style="cyan"))

    t = Table(title="Trigrams")
    t.add_column("Position", style="bold white")
    t.add_column("Trigram", style="magenta")
    t.add_column("Attributes", style="white")
    for label, trigram in (
        ("Bottom", analysis.bottom_trigram),
        ("Top", analysis.top_trigram),
        ("Bottom nuclear", analysis.bottom_nuclear_trigram),
        ("Top nuclear", analysis.top_nuclear_trigram),
    ):
        t.add_row(label, str(trigram), trigram.attributes)
    out.print(t)

    r = Table(title="Reachable hexagrams")
    r.add_column("Operation", style="yellow")
    r.add_column("Hex #", justify="right", style="cyan")
    r.add_column("Name", style="bold white")
    r.add_column("Lines changed", justify="right")
    for hexagram, op in analysis.reachable_hexagrams:
        r.add_row(str(op), str(hexagram.number), hexagram.name,
                  str(hexagram.num_line_changes(analysis.hexagram)))
    out.print(r)


# === Readings ===
def print_reading(reading: Reading, out: Optional[Console] = None) -> None:
    """Display a cast reading."""
    out = out or console
    out.rule("[bold cyan]☯ I-CHING READING ☯[/bold cyan]")
    if reading.question:
        out.print(f"[dim]Question:[/dim] {reading.question}")
    out.print(f"[dim]Time:[/dim] {reading.timestamp}")
    if reading.method is not None:
        out.print(f"[dim]Method:[/dim] {reading.method}   [dim]Randomness:[/dim] {reading.randomness}")
    out.print(f"[dim]Throws (bottom→top):[/dim] {', '.join(str(int(v)) for v in reading.values)}")
    out.print()

    out.print(Panel(hexagram_block(reading.present, reading.changing_positions),
                    title="[bold]Present Hexagram[/bold]", border_style="cyan"))
    if reading.future is not None:
        moved = ", ".join(str(p + 1) for p in reading.changing_positions)
        out.print(f"[yellow]Changing lines:[/yellow] {moved}")
        out.print(Panel(hexagram_block(reading.future),
                        title="[bold]Future Hexagram[/bold]", border_style="magenta"))
    else:
        out.print("[dim]No changing lines.[/dim]")
