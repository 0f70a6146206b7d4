"""Errors that abort an arlo command."""

from __future__ import annotations

from collections.abc import Sequence


class ArloError(Exception):
    """Base class for every failure the CLI reports and stops on."""


class WizardAborted(ArloError):
    """The user interrupted an interactive prompt."""

    def __init__(self, message: str = "Prompt cancelled.") -> None:
        super().__init__(message)


class MissingDependencies(ArloError):
    """One or more required tools are not resolvable on PATH."""

    def __init__(self, missing: Sequence[str] = ()) -> None:
        self.missing = list(missing)
        if self.missing:
            message = f"Some dependencies are missing: {', '.join(self.missing)}"
        else:
            message = "Some dependencies are missing."
        super().__init__(message)


class CommandError(ArloError):
    """An external command could not be started or exited non-zero."""

    def __init__(self, args: Sequence[str], returncode: int | None = None) -> None:
        self.args_list = list(args)
        self.returncode = returncode
        cmd = " ".join(self.args_list)
        if returncode is None:
            message = f"'{self.args_list[0]}' was not found on PATH (while running: {cmd})"
        else:
            message = f"Command failed with exit code {returncode}: {cmd}"
        super().__init__(message)


class ConfigTransformError(ArloError):
    """The Vite config could not be rewritten."""


class ConfigNotFoundError(ConfigTransformError):
    """Neither vite.config.ts nor vite.config.js exists."""


class ProjectConfigError(ArloError):
    """arlo.config.json is missing or unreadable."""
