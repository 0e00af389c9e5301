"""`pix31 generate`: render every icon in the set into one directory.

Batch counterpart of `add`: no prompts, existing files are overwritten, and
the barrel is rebuilt from whatever component files end up in the directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from pix31.codegen.components import render_component
from pix31.codegen.index_file import COMPONENT_SUFFIX, rebuild_index_file
from pix31.codegen.naming import component_name
from pix31.models.generation import GenerationStats
from pix31.svg.parser import extract_svg_path
from pix31.svg.store import IconStore

logger = logging.getLogger(__name__)


def generate_all_icons(store: IconStore, output_dir: Path, platform: str) -> GenerationStats:
    stats = GenerationStats()
    output_dir.mkdir(parents=True, exist_ok=True)

    files = store.list_files()
    stats.total_files = len(files)

    for svg_file in files:
        try:
            path_data = extract_svg_path(svg_file.read_text(encoding="utf-8"))
            if path_data is None:
                raise ValueError("Could not extract path data from SVG")
            source = render_component(platform, component_name(svg_file.name), path_data)
            (output_dir / f"{svg_file.stem}{COMPONENT_SUFFIX}").write_text(source, encoding="utf-8")
            stats.successful_files += 1
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", svg_file.name, e)
            stats.failed_files.append(svg_file.name)

    rebuild_index_file(output_dir, platform)
    return stats


def print_stats(stats: GenerationStats) -> None:
    typer.echo("Generation Complete!")
    typer.echo(f"Total SVG files: {stats.total_files}")
    typer.echo(f"Total TSX files generated: {stats.successful_files}")
    typer.echo(f"Total errors: {len(stats.failed_files)}")
    if stats.failed_files:
        typer.echo("Failed files:")
        for name in stats.failed_files:
            typer.echo(f"- {name}")
