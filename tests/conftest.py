"""Shared fixtures for the arlo test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from arlo.cli._errors import CommandError
from arlo.cli._wizard import Key, KeyEvent, KeyReader

VITE_CONFIG_TS = """\
import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'

// https://vite.dev/config/
export default defineConfig({
  plugins: [react()],
})
"""


class FakeRunner:
    """Records commands instead of running them, emulating their file side effects."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[tuple[tuple[str, ...], Path]] = []
        self.fail_on = fail_on

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [args for args, _ in self.calls]

    def __call__(self, *args: str, cwd: Path | None = None) -> None:
        where = Path(cwd) if cwd is not None else Path.cwd()
        self.calls.append((args, where.resolve()))

        if self.fail_on is not None and self.fail_on in args:
            raise CommandError(args, 1)

        if "create" in args or args[:2] == ("deno", "init"):
            project = where / args[-1]
            project.mkdir()
            (project / "vite.config.ts").write_text(VITE_CONFIG_TS)
        elif args[:3] == ("go", "mod", "init"):
            (where / "go.mod").write_text(f"module {args[3]}\n\ngo 1.22\n")


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


def keys(*events: KeyEvent | str) -> KeyReader:
    """Build a key reader that replays ``events``; plain strings are typed char by char."""
    queue: list[KeyEvent] = []
    for event in events:
        if isinstance(event, Key):
            queue.append(event)
        else:
            queue.extend(event)
    it = iter(queue)

    def read() -> KeyEvent:
        return next(it)

    return read


@pytest.fixture
def make_keys() -> Callable[..., KeyReader]:
    return keys


@pytest.fixture
def all_tools() -> Callable[[str], str | None]:
    return lambda tool: f"/usr/bin/{tool}"


@pytest.fixture
def no_tools() -> Callable[[str], str | None]:
    return lambda tool: None


@pytest.fixture
def which_except() -> Callable[[Iterable[str]], Callable[[str], str | None]]:
    def factory(missing: Iterable[str]) -> Callable[[str], str | None]:
        absent = set(missing)
        return lambda tool: None if tool in absent else f"/usr/bin/{tool}"

    return factory


@pytest.fixture
def vite_config_ts() -> str:
    return VITE_CONFIG_TS
