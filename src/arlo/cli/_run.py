"""``arlo dev`` and ``arlo build`` for an initialised project."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from arlo.cli._config import load_config
from arlo.cli._process import CommandRunner, run_command, start_command
from arlo.cli._provision import BACKEND_DIR

_console = Console()

Starter = Callable[..., subprocess.Popen]


def _backend_dir(root: Path) -> Path:
    backend = root / BACKEND_DIR
    if not backend.is_dir():
        raise FileNotFoundError(f"No {BACKEND_DIR}/ directory in {root.resolve()}")
    return backend


def run_dev(
    root: Path = Path("."),
    runner: CommandRunner = run_command,
    starter: Starter = start_command,
) -> None:
    """Start the Vite dev server in the background and ``air`` in the foreground."""
    project = load_config(root)
    backend = _backend_dir(root)

    _console.print(f"[bold cyan]●[/]  {project.name} [dim]dev[/]")
    frontend = starter(*project.package_manager.run_args("dev"), cwd=root)
    try:
        runner("air", cwd=backend)
    finally:
        if frontend.poll() is None:
            frontend.terminate()
            frontend.wait()


def run_build(root: Path = Path("."), runner: CommandRunner = run_command) -> None:
    """Build the frontend bundle, then the Go binary via ``build.go``."""
    project = load_config(root)
    backend = _backend_dir(root)

    _console.print(f"[bold cyan]●[/]  {project.name} [dim]build[/]")
    runner(*project.package_manager.run_args("build"), cwd=root)
    runner("go", "run", "build.go", cwd=backend)
    _console.print("[bold green]◇[/]  Build finished. Output in dist/")
