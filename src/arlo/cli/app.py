"""Typer CLI application for arlo."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Annotated, NoReturn

from rich.console import Console
from rich.markup import escape
from typer import Context, Exit, Option, Typer
from typer.core import TyperGroup

import arlo
from arlo.cli._errors import ArloError, WizardAborted
from arlo.cli._process import run_command
from arlo.cli._provision import init_project
from arlo.cli._run import run_build, run_dev

_console = Console()

USAGE = """\
Usage:

    arlo <command> [shorthand]

The commands are:

    init     (-i)    initialize a new arlo project
    dev      (-d)    starts your development environment
    build    (-b)    builds the final binary for distribution
    upgrade  (-u)    upgrades arlo to the latest version
    version  (-v)    prints app version
    help     (-h)    prints all the available commands
"""

_HINT = "use \narlo help or arlo -h\nTo get a list of commands"


class ArloGroup(TyperGroup):
    """Root group printing the arlo usage table and a hint for unknown commands."""

    def format_help(self, ctx: Context, formatter) -> None:
        formatter.write(USAGE)

    def resolve_command(self, ctx: Context, args: list[str]):
        cmd_name = args[0] if args else None
        if cmd_name is not None and self.get_command(ctx, cmd_name) is None:
            _console.print("Invalid Commands", markup=False, highlight=False)
            _console.print(_HINT, markup=False, highlight=False)
            raise Exit(code=1)
        return super().resolve_command(ctx, args)


app = Typer(
    cls=ArloGroup,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _fail(error: BaseException) -> NoReturn:
    if isinstance(error, WizardAborted):
        _console.print(f"[yellow]{escape(str(error))}[/]")
    else:
        _console.print(f"[bold red]Error:[/] {escape(str(error))}")
    raise Exit(code=1)


@app.command()
def init() -> None:
    """Initialize a new arlo project."""
    _console.print()
    _console.print(f"[bold cyan]●[/]  arlo v{arlo.__version__}")
    _console.print("[dim]│[/]")

    try:
        steps = init_project()
    except (ArloError, OSError) as e:
        _fail(e)

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done! Next steps:")
    for command in steps.commands():
        _console.print(f"[dim]│[/]  {escape(command)}")
    _console.print()


@app.command()
def dev() -> None:
    """Start your development environment."""
    try:
        run_dev()
    except (ArloError, OSError) as e:
        _fail(e)


@app.command()
def build() -> None:
    """Build the final binary for distribution."""
    try:
        run_build()
    except (ArloError, OSError) as e:
        _fail(e)


@app.command()
def upgrade() -> None:
    """Upgrade arlo to the latest version."""
    _console.print("Running Upgrade")
    try:
        run_command(sys.executable, "-m", "pip", "install", "--upgrade", "arlo")
    except ArloError as e:
        _fail(e)
    _console.print("Arlo Upgraded")


@app.command("version")
def version_() -> None:
    """Print the app version."""
    _console.print(arlo.__version__, markup=False, highlight=False)


@app.command("help")
def help_() -> None:
    """Print all the available commands."""
    _console.print(USAGE, markup=False, highlight=False)


def _shorthand(action: Callable[[], None]) -> Callable[[bool], None]:
    def callback(value: bool) -> None:
        if value:
            action()
            raise Exit()

    return callback


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    init_flag: Annotated[
        bool,
        Option("-i", hidden=True, is_eager=True, callback=_shorthand(init)),
    ] = False,
    dev_flag: Annotated[
        bool,
        Option("-d", hidden=True, is_eager=True, callback=_shorthand(dev)),
    ] = False,
    build_flag: Annotated[
        bool,
        Option("-b", hidden=True, is_eager=True, callback=_shorthand(build)),
    ] = False,
    upgrade_flag: Annotated[
        bool,
        Option("-u", hidden=True, is_eager=True, callback=_shorthand(upgrade)),
    ] = False,
    version_flag: Annotated[
        bool,
        Option("-v", hidden=True, is_eager=True, callback=_shorthand(version_)),
    ] = False,
) -> None:
    """arlo: full-stack Vite + Go project scaffolding."""
    if ctx.invoked_subcommand is None:
        _console.print("No Commands Passed", markup=False, highlight=False)
        _console.print(_HINT, markup=False, highlight=False)
