"""CLI for the omnicalc calculator suite.

Usage:
    python -m omnicalc scientific                    # Interactive calculator
    python -m omnicalc eval "2+3*4"                  # One-shot evaluation
    python -m omnicalc age 2000-01-15 --on 2024-03-10
    python -m omnicalc simplify "2x + 3x + 5"
    python -m omnicalc quadratic -- 1 -3 2           # ax^2 + bx + c = 0
    python -m omnicalc linear -- 2 -4                # ax + b = 0
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from omnicalc import display
from omnicalc.age import calculate_age
from omnicalc.algebra import simplify_expression, solve_linear, solve_quadratic
from omnicalc.config import Settings, load_settings
from omnicalc.errors import OmnicalcError
from omnicalc.router import events_from_text, feed
from omnicalc.session import CalculatorSession

app = typer.Typer(
    name="omnicalc",
    help="Scientific, age and algebra calculators",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_state: dict[str, Settings] = {}

_REPL_HELP = """\
Type keys and press return. Words: sin( cos( tan( log10( log( sqrt( pi e !
Keys: Enter (or =) Backspace Escape AC DEL
Commands: :history  :replay N  :clear-history  :quit"""


def _settings() -> Settings:
    return _state.get("settings") or load_settings()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=1, help="Significant digits for results"),
    history_size: Optional[int] = typer.Option(None, "--history-size", min=1, help="Calculations kept in history"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Scientific, age and algebra calculators."""
    settings = load_settings().with_overrides(
        precision=precision,
        history_size=history_size,
        log_level="DEBUG" if verbose else None,
    )
    _state["settings"] = settings
    _setup_logging(settings.log_level)


def _run_command(session: CalculatorSession, line: str) -> bool:
    """Handle a ':' command. Returns False when the REPL should stop."""
    cmd, _, arg = line[1:].partition(" ")
    if cmd in ("quit", "q"):
        return False
    if cmd == "history":
        display.render_history(session, out)
    elif cmd == "clear-history":
        session.history.clear()
        console.print("[dim]History cleared[/dim]")
    elif cmd == "replay":
        try:
            index = int(arg)
        except ValueError:
            console.print("[red]Usage: :replay N[/red]")
            return True
        if not session.replay(index):
            console.print(f"[yellow]No history entry {index}[/yellow]")
    elif cmd == "help":
        console.print(_REPL_HELP)
    else:
        console.print(f"[red]Unknown command: :{cmd}[/red]")
    return True


@app.command("scientific")
def cmd_scientific() -> None:
    """Interactive scientific calculator."""
    session = CalculatorSession.from_settings(_settings())
    console.print(_REPL_HELP)
    display.render_calculator(session, out)

    while True:
        try:
            line = console.input("[bold blue]›[/bold blue] ")
        except (EOFError, KeyboardInterrupt):
            break
        line = line.strip()
        if line.startswith(":"):
            if not _run_command(session, line):
                break
        else:
            feed(events_from_text(line), session)
        display.render_calculator(session, out)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. 'sqrt(16)+2^3'"),
) -> None:
    """Type an expression into a fresh calculator and press Enter."""
    session = CalculatorSession.from_settings(_settings())
    feed(events_from_text(expression), session)
    outcome = session.evaluate()
    out.print(session.text)
    if not outcome.ok:
        raise typer.Exit(1)


@app.command("age")
def cmd_age(
    birth: str = typer.Argument(help="Date of birth, e.g. 2000-01-15"),
    on: Optional[str] = typer.Option(None, "--on", help="Target date (default: today)"),
) -> None:
    """Exact age, next birthday and totals."""
    try:
        report = calculate_age(birth, on)
    except OmnicalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    if report is None:
        console.print("[yellow]Birth date is after the target date.[/yellow]")
        raise typer.Exit(1)
    display.render_age(report, out)


@app.command("simplify")
def cmd_simplify(
    expression: str = typer.Argument(help="Expression, e.g. '2x + 3x + 5'"),
) -> None:
    """Simplify an algebraic expression."""
    try:
        result = simplify_expression(expression)
    except OmnicalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    display.render_simplified(expression, result, out)


@app.command("quadratic")
def cmd_quadratic(
    a: str = typer.Argument(help="x² coefficient"),
    b: str = typer.Argument(help="x coefficient"),
    c: str = typer.Argument(help="Constant term"),
) -> None:
    """Solve ax² + bx + c = 0 (use -- before negative coefficients)."""
    try:
        solution = solve_quadratic(a, b, c)
    except OmnicalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    display.render_quadratic(solution, out)


@app.command("linear")
def cmd_linear(
    a: str = typer.Argument(help="x coefficient"),
    b: str = typer.Argument(help="Constant term"),
) -> None:
    """Solve ax + b = 0 (use -- before negative coefficients)."""
    try:
        solution = solve_linear(a, b)
    except OmnicalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    display.render_linear(solution, out)


if __name__ == "__main__":
    app()
