"""Run external tools with inherited stdio."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from arlo.cli._errors import CommandError

_console = Console()


class CommandRunner(Protocol):
    """Anything that runs a command and raises CommandError on failure."""

    def __call__(self, *args: str, cwd: Path | None = None) -> None: ...


def _resolve(args: tuple[str, ...]) -> str:
    if not args:
        raise ValueError("run_command needs at least a binary name")
    binary = shutil.which(args[0])
    if binary is None:
        raise CommandError(args)
    return binary


def run_command(*args: str, cwd: Path | None = None) -> None:
    """Run ``args`` to completion, raising CommandError if it is missing or fails."""
    binary = _resolve(args)
    _console.print(f"[dim]│  $ {escape(' '.join(args))}[/]")
    result = subprocess.run([binary, *args[1:]], cwd=cwd, check=False)
    if result.returncode != 0:
        raise CommandError(args, result.returncode)


def start_command(*args: str, cwd: Path | None = None) -> subprocess.Popen[bytes]:
    """Start ``args`` in the background and return the process handle."""
    binary = _resolve(args)
    _console.print(f"[dim]│  $ {escape(' '.join(args))} &[/]")
    return subprocess.Popen([binary, *args[1:]], cwd=cwd)
