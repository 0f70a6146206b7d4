"""Clack-style interactive wizard driven by single key presses."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

import readchar
from rich.console import Console
from rich.live import Live
from rich.text import Text

from arlo.cli._errors import WizardAborted
from arlo.cli._types import Framework, PackageManager, ProjectChoice

_console = Console()


class Key(str, Enum):
    """Normalised non-printable key events."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    BACKSPACE = "backspace"
    INTERRUPT = "interrupt"


KeyEvent = Key | str
KeyReader = Callable[[], KeyEvent]


class Stage(Enum):
    INPUT = "input"
    MENU = "menu"
    DONE = "done"


_KEY_MAP: dict[str, Key] = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    readchar.key.ENTER: Key.ENTER,
    readchar.key.CR: Key.ENTER,
    readchar.key.LF: Key.ENTER,
    readchar.key.BACKSPACE: Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    readchar.key.CTRL_C: Key.INTERRUPT,
}


def normalize_key(raw: str) -> KeyEvent:
    """Map a raw key sequence from ``readchar`` onto a :class:`Key` or a character."""
    return _KEY_MAP.get(raw, raw)


def read_key() -> KeyEvent:
    """Block for a single key press."""
    try:
        raw = readchar.readkey()
    except KeyboardInterrupt:
        return Key.INTERRUPT
    return normalize_key(raw)


@dataclass
class Prompt:
    """
    A selectable list, optionally preceded by a free-text input stage.

    The prompt moves forward only: INPUT -> MENU -> DONE (or MENU -> DONE when
    there is no text stage). An interrupt closes the session from any live
    stage without setting ``done``.

    Attributes:
        options: Menu entries, shown in this order.
        text_label: Label of the leading text stage, or None to start on the menu.
        text: Text typed so far.
        selection: Index of the highlighted option.
        done: True once the user confirmed a menu entry.
        closed: True once the session ended, confirmed or not.
    """

    options: list[str]
    text_label: str | None = None
    text: str = ""
    selection: int = 0
    done: bool = False
    closed: bool = False
    stage: Stage = field(init=False)

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("Prompt needs at least one option")
        self.stage = Stage.INPUT if self.text_label is not None else Stage.MENU

    @property
    def selected(self) -> str:
        return self.options[self.selection]

    def handle(self, key: KeyEvent) -> bool:
        """Apply one key event. Returns True when the session has ended."""
        if self.closed:
            return True

        if key is Key.INTERRUPT:
            self.closed = True
        elif self.stage is Stage.INPUT:
            self._handle_input(key)
        elif self.stage is Stage.MENU:
            self._handle_menu(key)

        return self.closed

    def _handle_input(self, key: KeyEvent) -> None:
        if key is Key.ENTER:
            self.stage = Stage.MENU
        elif key is Key.BACKSPACE:
            self.text = self.text[:-1]
        elif not isinstance(key, Key) and key.isprintable():
            self.text += key

    def _handle_menu(self, key: KeyEvent) -> None:
        if key is Key.UP:
            self.selection = max(self.selection - 1, 0)
        elif key is Key.DOWN:
            self.selection = min(self.selection + 1, len(self.options) - 1)
        elif key is Key.ENTER:
            self.stage = Stage.DONE
            self.done = True
            self.closed = True

    def render(self) -> str:
        lines: list[str] = []
        if self.stage is Stage.INPUT:
            return f"{self.text_label}{self.text}"

        if self.text_label is not None:
            lines.append(f"You typed: {self.text}")

        if self.stage is Stage.MENU:
            if self.text_label is not None:
                lines.append("")
            lines.append("Choose an option:")
            lines.append("")
            for i, opt in enumerate(self.options):
                cursor = ">" if i == self.selection else " "
                lines.append(f"{cursor} {opt}")
        else:
            lines.append(f"You selected: {self.selected}")

        return "\n".join(lines) + "\n"


def run_prompt(prompt: Prompt, key_reader: KeyReader = read_key) -> Prompt:
    """Drive ``prompt`` one key at a time until it closes."""
    with Live(
        Text(prompt.render()), console=_console, auto_refresh=False, transient=False
    ) as live:
        while not prompt.handle(key_reader()):
            live.update(Text(prompt.render()), refresh=True)
        live.update(Text(prompt.render()), refresh=True)

    if not prompt.done:
        raise WizardAborted()
    return prompt


def prompt_project(key_reader: KeyReader = read_key) -> ProjectChoice:
    """Ask for the project name and the frontend package manager."""
    managers = list(PackageManager)
    _console.print("[bold cyan]◆[/]  New arlo project")
    _console.print("[dim]│[/]")

    prompt = run_prompt(
        Prompt(options=[m.label for m in managers], text_label="Enter Project Name: "),
        key_reader,
    )
    return ProjectChoice(name=prompt.text, package_manager=managers[prompt.selection])


def prompt_framework(key_reader: KeyReader = read_key) -> Framework:
    """Ask which Go backend framework to scaffold."""
    frameworks = list(Framework)
    _console.print("[bold cyan]◆[/]  Select Go API framework:")
    _console.print("[dim]│[/]")

    prompt = run_prompt(Prompt(options=[f.label for f in frameworks]), key_reader)
    return frameworks[prompt.selection]
