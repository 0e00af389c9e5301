"""Exception types raised by pix31."""

from __future__ import annotations


class Pix31Error(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigError(Pix31Error):
    pass


class IconSourceNotFoundError(Pix31Error):
    def __init__(self, icons_dir: str) -> None:
        super().__init__(
            f"Failed to find SVG files in {icons_dir}. "
            "Please install pixelarticons package with: npm install pixelarticons"
        )
        self.icons_dir = icons_dir


class MissingSourceFileError(Pix31Error):
    """An icon name was listed as available but its file is gone."""

    def __init__(self, icon_name: str) -> None:
        super().__init__(f"Could not find SVG file for {icon_name}")
        self.icon_name = icon_name


class ExtractionError(Pix31Error):
    def __init__(self, icon_name: str) -> None:
        super().__init__(f"Failed to extract path data from {icon_name}")
        self.icon_name = icon_name


class UnreadableSourceFileError(Pix31Error):
    """The icon's SVG file exists but is not valid UTF-8 text."""

    def __init__(self, icon_name: str) -> None:
        super().__init__(f"Could not decode SVG file for {icon_name} as UTF-8")
        self.icon_name = icon_name
