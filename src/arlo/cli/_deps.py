"""Check that the tools arlo drives are installed."""

from __future__ import annotations

import shutil
from collections.abc import Callable

from rich.console import Console

from arlo.cli._types import PackageManager

_console = Console()

CORE_TOOLS: tuple[str, ...] = ("go", "node", "air")

Which = Callable[[str], str | None]


def _check_tool(tool: str, which: Which) -> bool:
    if which(tool):
        _console.print(f"[dim]│[/]  [green]✔[/] {tool} is installed")
        return True
    _console.print(f"[dim]│[/]  [red]✘[/] {tool} is NOT installed")
    return False


def missing_tools(tool: str, which: Which = shutil.which) -> list[str] | None:
    """
    Check the core toolchain plus the chosen package manager.

    Returns the list of tools that could not be resolved on PATH, or None if
    ``tool`` is not a supported package manager (nothing is checked then).
    """
    tool = tool.lower()
    supported = {m.value for m in PackageManager}
    if tool not in supported:
        _console.print(f"[yellow]⚠[/] '{tool}' is not a supported JS tool")
        return None

    return [t for t in (*CORE_TOOLS, tool) if not _check_tool(t, which)]


def check_dependencies(tool: str, which: Which = shutil.which) -> bool:
    """Return True only if go, node, air and ``tool`` are all on PATH."""
    missing = missing_tools(tool, which)
    if missing is None:
        return False
    if missing:
        _console.print(f"[dim]│[/]  [red]Missing:[/] {', '.join(missing)}")
        return False
    return True
