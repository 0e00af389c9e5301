"""Short coloured status lines for the terminal."""

from __future__ import annotations

import typer


def success(message: str) -> None:
    typer.echo(f"{typer.style('✓', fg=typer.colors.GREEN)} {message}")


def not_found(message: str) -> None:
    typer.echo(f"{typer.style('✗', fg=typer.colors.RED)} {message}")


def error(message: str) -> None:
    typer.echo(f"{typer.style('✖', fg=typer.colors.RED)} {message}", err=True)


def warn(message: str) -> None:
    typer.echo(f"{typer.style('!', fg=typer.colors.YELLOW)} {message}")


def ask(message: str) -> None:
    typer.echo(f"{typer.style('?', fg=typer.colors.MAGENTA)} {message}")


def info(message: str = "") -> None:
    typer.echo(f"{typer.style('info', fg=typer.colors.CYAN)} {message}".rstrip())


def notice(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW)
