"""Rich renderers for the calculator tools.

Read-only views: nothing here mutates a session or a result.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from omnicalc.models import AgeReport, LinearSolution, QuadraticSolution
from omnicalc.session import CalculatorSession


def calculator_panel(session: CalculatorSession) -> Panel:
    """The display area: "Ans =" preview line above the buffer text."""
    preview = session.ans_preview
    ans = Text(f"Ans = {preview}" if preview is not None else "", style="dim", justify="right")
    style = "bold red" if session.buffer.errored else "bold"
    main = Text(session.text, style=style, justify="right")
    return Panel(Group(ans, main), title="Scientific", border_style="blue")


def render_calculator(session: CalculatorSession, console: Console) -> None:
    console.print(calculator_panel(session))


def render_history(session: CalculatorSession, console: Console) -> None:
    """Render the history log, newest first, with replay indexes."""
    if not len(session.history):
        console.print("[dim]No history yet[/dim]")
        return

    table = Table(title="Calculation History", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Expression", style="cyan")
    table.add_column("Result", style="green", justify="right")

    for i, entry in enumerate(session.history):
        table.add_row(str(i), entry.expression, entry.result)

    console.print(table)


def render_age(report: AgeReport, console: Console) -> None:
    """Age card, next birthday and summary totals."""
    headline = (
        f"[bold]{report.years}[/bold] years  "
        f"[bold]{report.months}[/bold] months  "
        f"[bold]{report.days}[/bold] days"
    )
    console.print(Panel(headline, title="Your Age", border_style="magenta"))

    nb = report.next_birthday
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="dim", min_width=20)
    table.add_column("Value", justify="right")
    table.add_row("Next birthday", f"{nb.days_until:,} days (on a {nb.weekday})")
    table.add_row("Total days lived", f"{report.total_days:,}")
    table.add_row("Total months", f"{report.total_months:,}")
    table.add_row("Total weeks", f"{report.total_weeks:,}")
    table.add_row("Total hours (approx)", f"{report.total_hours:,}")
    console.print(table)


def render_quadratic(solution: QuadraticSolution, console: Console) -> None:
    table = Table(title=f"Roots ({solution.kind})", show_header=False)
    table.add_column("Root", style="dim")
    table.add_column("Value", style="green", justify="right")
    table.add_row("x₁", solution.x1)
    table.add_row("x₂", solution.x2)
    console.print(table)


def render_linear(solution: LinearSolution, console: Console) -> None:
    console.print(f"x = [green]{solution.x}[/green]")


def render_simplified(expression: str, simplified: str, console: Console) -> None:
    console.print(f"{expression} → [green]{simplified}[/green]")
