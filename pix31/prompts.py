"""Interactive prompts.

Commands only talk to the Prompter protocol so tests can script answers.
TerminalPrompter is the typer-backed implementation used by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import typer

CANCEL_VALUE = "cancel"


@dataclass(frozen=True)
class Choice:
    value: str
    label: str


class Prompter(Protocol):
    def select(self, message: str, options: list[Choice]) -> str | None: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def text(self, message: str, default: str = "") -> str | None: ...


class TerminalPrompter:
    """Numbered-menu / yes-no prompts on stdin. Ctrl-C or EOF answers None/no."""

    def select(self, message: str, options: list[Choice]) -> str | None:
        if not options:
            return None

        for i, option in enumerate(options, start=1):
            typer.echo(f"  {i}) {option.label}")

        while True:
            try:
                answer = typer.prompt(message, default="1")
            except typer.Abort:
                return None
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1].value
            typer.secho(f"Enter a number between 1 and {len(options)}", fg=typer.colors.RED)

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return typer.confirm(message, default=default)
        except typer.Abort:
            return False

    def text(self, message: str, default: str = "") -> str | None:
        try:
            return typer.prompt(message, default=default or None)
        except typer.Abort:
            return None


def suggestion_choices(suggestions: list[str]) -> list[Choice]:
    """Suggestions followed by the CANCEL sentinel."""
    return [Choice(value=name, label=name) for name in suggestions] + [Choice(value=CANCEL_VALUE, label="CANCEL")]
