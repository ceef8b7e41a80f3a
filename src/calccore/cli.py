"""Terminal shell for the calculator.

Usage:
    calccore run                 # Interactive session
    calccore eval 12 + 7 =       # Feed keys, print the display
    calccore keys                # Show the key bindings

Each input token is either a named key (enter, escape, backspace, neg,
undo) or a run of single-character keys such as ``12.5*3=``.
"""

from __future__ import annotations

import logging
from typing import List

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from calccore import keyboard
from calccore.config import Settings
from calccore.core import Calculator
from calccore.exceptions import CalculatorError, ConfigurationError, InvalidInputError
from calccore.models import CalculatorState

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="calccore",
    help="Immediate-execution arithmetic calculator",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

NAMED_KEYS = {
    "enter": "Enter",
    "escape": "Escape",
    "esc": "Escape",
    "backspace": "Backspace",
    "bs": "Backspace",
}
QUIT_WORDS = frozenset({"quit", "exit", "q"})


def feed_token(calc: Calculator, token: str) -> Calculator:
    """
    Apply one input token to the session.

    Raises:
        InvalidInputError: If the token contains a key with no binding
        CalculatorError: If ``undo`` has nothing to undo
    """
    name = token.strip().lower()
    if name in NAMED_KEYS:
        return calc.press_key(NAMED_KEYS[name])
    if name == "neg":
        return calc.toggle_sign()
    if name == "undo":
        return calc.undo()

    keys = [char for char in token if not char.isspace()]
    unbound = [key for key in keys if keyboard.resolve_key(key) is None]
    if unbound:
        raise InvalidInputError(token, f"Unbound key {unbound[0]!r}")

    for key in keys:
        calc.press_key(key)
    return calc


def render_state(state: CalculatorState, show_state: bool = False) -> Panel:
    """Build the display panel for a state snapshot."""
    if state.error is not None:
        value = Text(state.display_value, style="bold red")
    elif state.result is not None:
        value = Text(state.display_value, style="bold green")
    else:
        value = Text(state.display_value, style="bold")
    value.justify = "right"

    subtitle = str(state.operation) if state.operation is not None and state.error is None else None
    panel = Panel(value, title="calccore", subtitle=subtitle, width=32)

    if not show_state:
        return panel

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("current_input", repr(state.current_input))
    table.add_row("previous_value", repr(state.previous_value))
    table.add_row("operation", repr(state.operation))
    table.add_row("error", repr(state.error))
    table.add_row("result", repr(state.result))

    grid = Table.grid()
    grid.add_row(panel)
    grid.add_row(table)
    return Panel(grid, border_style="dim", width=36)


@app.callback()
def main(ctx: typer.Context) -> None:
    """Configure logging from the environment."""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("Loaded %s", settings)
    ctx.obj = settings


@app.command("run")
def cmd_run(ctx: typer.Context) -> None:
    """Start an interactive session."""
    settings: Settings = ctx.obj
    calc = Calculator()
    console.print(render_state(calc.state, settings.show_state))

    while True:
        try:
            line = console.input("[dim]>[/dim] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip().lower() in QUIT_WORDS:
            break

        for token in line.split():
            try:
                feed_token(calc, token)
            except CalculatorError as e:
                err_console.print(f"[yellow]{e}[/yellow]")
                break

        console.print(render_state(calc.state, settings.show_state))


@app.command("eval")
def cmd_eval(
    keys: List[str] = typer.Argument(help="Keys to press, e.g. 12 + 7 ="),
) -> None:
    """Press the given keys and print the final display."""
    calc = Calculator()
    for token in keys:
        try:
            feed_token(calc, token)
        except CalculatorError as e:
            err_console.print(f"[red]{e}[/red]")
            raise typer.Exit(2)

    typer.echo(calc.display)
    if calc.state.error is not None:
        raise typer.Exit(1)


@app.command("keys")
def cmd_keys() -> None:
    """Show the key bindings."""
    table = Table(title="Key Bindings", show_header=True, header_style="bold")
    table.add_column("Key", style="green")
    table.add_column("Action")
    table.add_column("Argument")

    for key, (action, argument) in keyboard.KEY_BINDINGS.items():
        table.add_row(key, action.value, "" if argument is None else str(argument))
    table.add_row("neg", "toggle_sign", "")
    table.add_row("undo", "undo", "")

    console.print(table)
