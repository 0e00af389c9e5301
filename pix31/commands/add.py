"""`pix31 add`: generate icon components into the project.

Each requested name is handled on its own, in order:

    found     → [override prompt] → extract → render → write → index export
    not found → rank suggestions → [select prompt] → same path as found

A failure or a "no" for one icon never stops the rest of the batch.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pix31 import console
from pix31.codegen.components import build_component
from pix31.codegen.index_file import append_icon_export, component_path, ensure_index_file, icon_file_exists
from pix31.codegen.naming import component_name
from pix31.commands.init import initialize_config
from pix31.config import ProjectConfig, read_config, settings
from pix31.errors import ConfigError, ExtractionError, Pix31Error
from pix31.models.generation import AddSummary, IconOutcome, IconResult
from pix31.prompts import CANCEL_VALUE, Prompter, suggestion_choices
from pix31.search.similarity import search_related_file_names
from pix31.svg.parser import extract_svg_path
from pix31.svg.store import IconStore

logger = logging.getLogger(__name__)

EMPTY_REQUEST_HINT = 'Type out which icons you want to install. Run "pix31 list" to browse available icon names.'


def prompt_override(prompter: Prompter, name: str) -> bool:
    return prompter.confirm(f"Would you like to override /{name}.tsx", default=False)


def generate_icon_component(
    config: ProjectConfig,
    root: Path,
    icon_name: str,
    svg_text: str,
    prompter: Prompter,
) -> bool:
    """Write <outputPath>/<icon_name>.tsx. Returns False if the user keeps the existing file.

    Raises ExtractionError when the SVG has no usable path data.
    """
    name = component_name(icon_name)

    if icon_file_exists(config, root, icon_name):
        console.warn(f"{name} already exists in {config.output_path}")
        if not prompt_override(prompter, name):
            return False

    path_data = extract_svg_path(svg_text)
    if path_data is None:
        raise ExtractionError(icon_name)

    component = build_component(config.platform, icon_name, name, path_data)
    target = component_path(config, root, icon_name)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(component.source, encoding="utf-8")
    logger.info("Wrote %s (%d paths)", target, len(path_data))
    return True


def _generate(
    config: ProjectConfig,
    root: Path,
    store: IconStore,
    prompter: Prompter,
    requested: str,
    icon_name: str,
) -> IconResult:
    name = component_name(icon_name)
    try:
        svg_text = store.read(icon_name)
        if not generate_icon_component(config, root, icon_name, svg_text, prompter):
            return IconResult(requested=requested, resolved=icon_name, outcome=IconOutcome.SKIPPED)
        append_icon_export(config, root, icon_name)
    except (Pix31Error, OSError) as e:
        logger.error("Failed to generate %s: %s", name, e)
        console.error(f"Failed to generate {name}: {e}")
        return IconResult(requested=requested, resolved=icon_name, outcome=IconOutcome.FAILED, message=str(e))

    console.success(f"{name} ({config.platform_label})")
    return IconResult(requested=requested, resolved=icon_name, outcome=IconOutcome.GENERATED)


def _suggest(
    config: ProjectConfig,
    root: Path,
    store: IconStore,
    prompter: Prompter,
    requested: str,
    available: list[str],
) -> IconResult:
    console.not_found(f'"{requested}" not found.')
    suggestions = search_related_file_names(requested, available)
    if not suggestions:
        return IconResult(requested=requested, outcome=IconOutcome.NOT_FOUND)

    console.ask("Here are other similar icons:")
    selected = prompter.select("Select an icon", suggestion_choices(suggestions))
    if not selected or selected == CANCEL_VALUE:
        return IconResult(requested=requested, outcome=IconOutcome.CANCELLED)

    return _generate(config, root, store, prompter, requested, selected)


def _load_config(root: Path, prompter: Prompter, install: bool) -> ProjectConfig | None:
    try:
        config = read_config(root)
    except ConfigError as e:
        console.error(f"{e}. Creating config file.")
    else:
        if config is not None:
            return config
        console.error(f"{settings.config_file_name} config file not found. Creating config file.")

    return initialize_config(root, prompter, install=install)


def add_icons(
    icons: list[str],
    *,
    root: Path,
    store: IconStore,
    prompter: Prompter,
    config: ProjectConfig | None = None,
    install: bool = True,
) -> AddSummary | None:
    """Run the add flow. Returns None when no config could be obtained."""
    summary = AddSummary()
    if not icons:
        console.notice(EMPTY_REQUEST_HINT)
        return summary

    if config is None:
        config = _load_config(root, prompter, install)
        if config is None:
            console.notice("Operation cancelled")
            return None

    try:
        ensure_index_file(config, root)
    except OSError as e:
        raise ConfigError(f"Cannot prepare output directory {config.output_path}: {e}") from e
    available = store.list_names()
    available_set = set(available)

    for icon in icons:
        if icon in available_set:
            result = _generate(config, root, store, prompter, icon, icon)
        else:
            result = _suggest(config, root, store, prompter, icon, available)
        summary.results.append(result)

    logger.info(
        "add finished: %d generated, %d skipped, %d failed, %d not found",
        len(summary.generated),
        len(summary.skipped),
        len(summary.failed),
        len(summary.not_found),
    )
    return summary
