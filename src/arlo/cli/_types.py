"""Enums and records shared across the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PackageManager(str, Enum):
    """Frontend package managers, in wizard order."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    DENO = "deno"
    BUN = "bun"

    @property
    def label(self) -> str:
        return self.value

    def create_args(self, name: str) -> list[str]:
        """Command that scaffolds a Vite app into ``name``."""
        if self is PackageManager.NPM:
            return ["npm", "create", "vite@latest", name]
        if self is PackageManager.DENO:
            return ["deno", "init", "--npm", "vite", name]
        return [self.value, "create", "vite", name]

    @property
    def install_args(self) -> list[str]:
        if self is PackageManager.YARN:
            return ["yarn"]
        return [self.value, "install"]

    @property
    def install_command(self) -> str:
        return " ".join(self.install_args)

    @property
    def node_types_args(self) -> list[str] | None:
        """Command adding ``@types/node`` as a dev dependency, or None for deno."""
        commands: dict[PackageManager, list[str] | None] = {
            PackageManager.NPM: ["npm", "i", "--save-dev", "@types/node"],
            PackageManager.YARN: ["yarn", "add", "--dev", "@types/node"],
            PackageManager.PNPM: ["pnpm", "add", "-D", "@types/node"],
            PackageManager.DENO: None,
            PackageManager.BUN: ["bun", "add", "-d", "@types/node"],
        }
        return commands[self]

    def run_args(self, script: str) -> list[str]:
        """Command running a package.json script."""
        if self is PackageManager.YARN:
            return ["yarn", script]
        if self is PackageManager.DENO:
            return ["deno", "task", script]
        return [self.value, "run", script]


class Framework(str, Enum):
    """Backend scaffold variants."""

    STANDARD = "Standard"
    GIN = "Gin"

    @property
    def label(self) -> str:
        return self.value

    @property
    def template_prefix(self) -> str:
        prefixes: dict[Framework, str] = {
            Framework.STANDARD: "std",
            Framework.GIN: "gin",
        }
        return prefixes[self]

    @property
    def go_modules(self) -> list[str]:
        """Extra modules fetched with ``go get`` after rendering."""
        modules: dict[Framework, list[str]] = {
            Framework.STANDARD: [],
            Framework.GIN: ["github.com/gin-gonic/gin"],
        }
        return modules[self]


@dataclass(frozen=True)
class ProjectChoice:
    """
    Result of the first wizard stage.

    Attributes:
        name: Project name exactly as typed.
        package_manager: Chosen frontend package manager.
    """

    name: str
    package_manager: PackageManager

    @property
    def slug(self) -> str:
        """Lower-cased name used for the directory and the Go module."""
        return self.name.lower()

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "packageManager": self.package_manager.value}


@dataclass(frozen=True)
class TemplateData:
    title: str
