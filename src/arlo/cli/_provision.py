"""The ``arlo init`` pipeline: wizard, dependency check, then provisioning."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from arlo.cli._config import CONFIG_FILENAME, write_config
from arlo.cli._deps import Which, missing_tools
from arlo.cli._errors import MissingDependencies
from arlo.cli._process import CommandRunner, run_command
from arlo.cli._renderer import copy_template, create_backend
from arlo.cli._types import Framework, ProjectChoice, TemplateData
from arlo.cli._vite import patch_vite_config
from arlo.cli._wizard import KeyReader, prompt_framework, prompt_project, read_key

_console = Console()

BACKEND_DIR = "src-backend"


@dataclass(frozen=True)
class NextSteps:
    """What the user runs once the project exists."""

    directory: str
    install: str
    dev: str = "arlo dev"

    def commands(self) -> list[str]:
        return [f"cd {self.directory}", self.install, self.dev]


def _step(message: str) -> None:
    _console.print(f"[bold green]◇[/]  {message}")


def install_node_types(project: ProjectChoice, runner: CommandRunner) -> None:
    args = project.package_manager.node_types_args
    if args is None:
        _console.print(
            f"[dim]│[/]  {project.package_manager.value} does not require @types/node."
        )
        return
    runner(*args)


def provision(
    project: ProjectChoice,
    framework: Framework,
    runner: CommandRunner = run_command,
) -> NextSteps:
    """
    Create the frontend and backend for ``project`` under the current directory.

    The working directory is changed twice: into the project directory once
    the frontend exists, then into its ``src-backend``. Steps are not retried
    and nothing is rolled back; the first failure propagates and leaves the
    partially created project in place.
    """
    slug = project.slug
    pm = project.package_manager

    _step(f"Creating {slug}/ with {pm.value}...")
    runner(*pm.create_args(slug))

    os.chdir(slug)

    write_config(project)
    _console.print(f"[dim]│[/]  {CONFIG_FILENAME}")

    install_node_types(project, runner)

    config_path = patch_vite_config(Path("."))
    _console.print(f"[dim]│[/]  {config_path.name} [dim]— /api proxy to VITE_API_URL[/]")

    _step(f"Creating {BACKEND_DIR}/ with {framework.value}...")
    os.mkdir(BACKEND_DIR)
    os.chdir(BACKEND_DIR)

    runner("go", "mod", "init", slug)
    copy_template("air.toml.tmpl", Path(".air.toml"))

    created = create_backend(framework, TemplateData(title=slug), runner)
    for name in [".air.toml", *created]:
        _console.print(f"[dim]│[/]  {BACKEND_DIR}/{name}")

    return NextSteps(directory=slug, install=pm.install_command)


def init_project(
    runner: CommandRunner = run_command,
    which: Which = shutil.which,
    key_reader: KeyReader = read_key,
) -> NextSteps:
    """Run the whole ``arlo init`` flow. Raises ArloError on the first failure."""
    project = prompt_project(key_reader)

    _console.print()
    missing = missing_tools(project.package_manager.value, which)
    if missing is None:
        raise MissingDependencies()
    if missing:
        raise MissingDependencies(missing)
    _console.print("[bold green]◇[/]  All dependencies are installed.")
    _console.print()

    framework = prompt_framework(key_reader)
    return provision(project, framework, runner)
