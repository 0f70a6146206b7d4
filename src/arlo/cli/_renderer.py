"""Renders backend templates to files on disk."""

from __future__ import annotations

import importlib.resources as ilr
from pathlib import Path

from arlo.cli._process import CommandRunner
from arlo.cli._types import Framework, TemplateData

_TEMPLATE_PKG = "arlo.cli.scaffold"

# destination -> template suffix; the template name is "<prefix>.<suffix>"
_BACKEND_FILES: dict[str, str] = {
    "main.go": "main.go.tmpl",
    "app/app.go": "app.go.tmpl",
    "build.go": "build.go.tmpl",
}


def _read(filename: str) -> str:
    resource = ilr.files(_TEMPLATE_PKG).joinpath(filename)
    if not resource.is_file():
        raise FileNotFoundError(f"Template not found: {filename}")
    return resource.read_text(encoding="utf-8")


def render_template(filename: str, dest: Path, data: TemplateData) -> Path:
    """Render ``filename`` with ``data`` into ``dest``."""
    content = _read(filename).replace("__TITLE__", data.title)
    dest.write_text(content, encoding="utf-8")
    return dest


def copy_template(filename: str, dest: Path) -> Path:
    """Copy ``filename`` verbatim into ``dest``."""
    dest.write_text(_read(filename), encoding="utf-8")
    return dest


def create_backend(
    framework: Framework,
    data: TemplateData,
    runner: CommandRunner,
    directory: Path = Path("."),
) -> list[str]:
    """Render the Go backend for ``framework``. Returns list of created file names."""
    prefix = framework.template_prefix
    (directory / "app").mkdir()

    for dest, suffix in _BACKEND_FILES.items():
        render_template(f"{prefix}.{suffix}", directory / dest, data)

    for module in framework.go_modules:
        runner("go", "get", module, cwd=directory)

    return list(_BACKEND_FILES)
