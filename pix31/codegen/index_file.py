"""Barrel file (index.ts) maintenance for the output directory.

The index is append-only: each generated icon adds one export line unless an
identical line is already present. Every function takes the project root
explicitly instead of resolving against the process working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pix31.codegen.naming import get_export_line
from pix31.codegen.templates import index_template
from pix31.config import ProjectConfig

logger = logging.getLogger(__name__)

INDEX_FILE_NAME = "index.ts"
COMPONENT_SUFFIX = ".tsx"


def output_dir(config: ProjectConfig, root: Path) -> Path:
    return root / config.output_path


def index_path(config: ProjectConfig, root: Path) -> Path:
    return output_dir(config, root) / INDEX_FILE_NAME


def component_path(config: ProjectConfig, root: Path, icon_name: str) -> Path:
    return output_dir(config, root) / f"{icon_name}{COMPONENT_SUFFIX}"


def ensure_index_file(config: ProjectConfig, root: Path) -> Path:
    """Create the output directory and a header-only index if missing."""
    path = index_path(config, root)
    path.parent.mkdir(parents=True, exist_ok=True)

    if not path.exists():
        path.write_text(index_template(config.platform), encoding="utf-8")
        logger.info("Created index file %s (%s)", path, config.platform)

    return path


def append_icon_export(config: ProjectConfig, root: Path, icon_name: str) -> bool:
    """Append the export line for ``icon_name``. Returns False if already exported."""
    path = ensure_index_file(config, root)
    existing = path.read_text(encoding="utf-8")
    export_line = get_export_line(config.platform, icon_name)

    if any(line.strip() == export_line for line in existing.split("\n")):
        logger.debug("Export for %s already present in %s", icon_name, path)
        return False

    needs_newline = len(existing) > 0 and not existing.endswith("\n")
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"\n{export_line}\n" if needs_newline else f"{export_line}\n")

    logger.info("Added export for %s to %s", icon_name, path)
    return True


def icon_file_exists(config: ProjectConfig, root: Path, icon_name: str) -> bool:
    return component_path(config, root, icon_name).exists()


def rebuild_index_file(directory: Path, platform: str) -> Path:
    """Rewrite ``directory``/index.ts from scratch: header + one export per component file."""
    directory.mkdir(parents=True, exist_ok=True)
    names = sorted(p.stem for p in directory.glob(f"*{COMPONENT_SUFFIX}") if p.stem != "index")

    content = index_template(platform)
    if names:
        content += "\n" + "".join(f"{get_export_line(platform, name)}\n" for name in names)

    path = directory / INDEX_FILE_NAME
    path.write_text(content, encoding="utf-8")
    logger.info("Generated index file with %d icon exports", len(names))
    return path
