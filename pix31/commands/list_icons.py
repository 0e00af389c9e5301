"""`pix31 list`: print available icon names, or the best matches for a query."""

from __future__ import annotations

import typer

from pix31.search.similarity import search_related_file_names
from pix31.svg.store import IconStore


def list_icons(store: IconStore, query: str | None = None, limit: int = 10) -> list[str]:
    names = store.list_names()
    if query:
        if query in names:
            shown = [query]
        else:
            shown = search_related_file_names(query, names, limit=limit)
    else:
        shown = names

    for name in shown:
        typer.echo(name)
    if not query:
        typer.secho(f"{len(names)} icons available", fg=typer.colors.CYAN)
    return shown
