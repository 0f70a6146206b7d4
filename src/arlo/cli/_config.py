"""Read and write ``arlo.config.json``."""

from __future__ import annotations

import json
from pathlib import Path

from arlo.cli._errors import ProjectConfigError
from arlo.cli._types import PackageManager, ProjectChoice

CONFIG_FILENAME = "arlo.config.json"


def write_config(project: ProjectChoice, directory: Path = Path(".")) -> Path:
    """Persist ``project`` as ``arlo.config.json`` in ``directory``."""
    path = directory / CONFIG_FILENAME
    path.write_text(json.dumps(project.to_dict(), indent=2) + "\n", encoding="utf-8")
    return path


def load_config(directory: Path = Path(".")) -> ProjectChoice:
    """Load the project choice saved by ``arlo init``."""
    path = directory / CONFIG_FILENAME
    if not path.is_file():
        raise ProjectConfigError(
            f"No {CONFIG_FILENAME} in {directory.resolve()}. Is this an arlo project?"
        )

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProjectConfigError(f"{CONFIG_FILENAME} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or "name" not in data or "packageManager" not in data:
        raise ProjectConfigError(f"{CONFIG_FILENAME} must define name and packageManager")

    try:
        manager = PackageManager(str(data["packageManager"]).lower())
    except ValueError:
        raise ProjectConfigError(
            f"Unsupported package manager in {CONFIG_FILENAME}: {data['packageManager']!r}"
        ) from None

    return ProjectChoice(name=str(data["name"]), package_manager=manager)
