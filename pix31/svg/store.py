"""Read-only access to the bundled SVG icon set."""

from __future__ import annotations

import logging
from pathlib import Path

from pix31.errors import IconSourceNotFoundError, MissingSourceFileError, UnreadableSourceFileError

logger = logging.getLogger(__name__)


class IconStore:
    """Name → SVG markup lookup over a directory of .svg files.

    Nothing is cached; every call reflects the directory as it is now.
    """

    def __init__(self, icons_dir: Path) -> None:
        self.icons_dir = icons_dir

    @classmethod
    def for_project(cls, root: Path, icons_dir: str) -> IconStore:
        return cls(root / icons_dir)

    def list_files(self) -> list[Path]:
        try:
            entries = sorted(self.icons_dir.iterdir())
        except OSError as e:
            raise IconSourceNotFoundError(str(self.icons_dir)) from e

        files = [p for p in entries if p.suffix == ".svg" and p.is_file()]
        logger.debug("Found %d SVG files in %s", len(files), self.icons_dir)
        return files

    def list_names(self) -> list[str]:
        return [p.stem for p in self.list_files()]

    def path_for(self, name: str) -> Path:
        path = self.icons_dir / f"{name}.svg"
        if not path.is_file():
            raise MissingSourceFileError(name)
        return path

    def read(self, name: str) -> str:
        try:
            return self.path_for(name).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise UnreadableSourceFileError(name) from e
