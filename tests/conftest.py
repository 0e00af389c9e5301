"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from pix31.config import ProjectConfig
from pix31.prompts import Choice
from pix31.svg.store import IconStore


# Sample SVGs in the shape pixelarticons ships them

HOME_PATH = "M12 2L2 12h3v8h6v-6h2v6h6v-8h3L12 2z"
BOX_PATH = "M4 4h16v16H4z"

SINGLE_PATH_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="{HOME_PATH}"/>
</svg>'''

MULTI_PATH_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="{HOME_PATH}"/>
  <path d="{BOX_PATH}"/>
</svg>'''

NESTED_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <g>
    <path d="M1 1h1"/>
    <g><path d="M3 3h3"/></g>
  </g>
  <path d="M2 2h2"/>
</svg>'''

RECT_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <rect width="24" height="24"/>
</svg>'''

CHEVRON_DOWN_SVG = '''<svg fill="none" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M7 8H5v2h2v2h2v2h2v2h2v-2h2v-2h2v-2h2V8h-2v2h-2v2h-2v2h-2v-2H9v-2H7V8z" fill="currentColor"/>
</svg>'''

CHEVRON_UP_SVG = '''<svg fill="none" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M7 16H5v-2h2v-2h2v-2h2V8h2v2h2v2h2v2h2v2h-2v-2h-2v-2h-2v-2h-2v2H9v2H7v2z" fill="currentColor"/>
</svg>'''

ICON_SET = {
    "chevron-down": CHEVRON_DOWN_SVG,
    "chevron-up": CHEVRON_UP_SVG,
    "home": SINGLE_PATH_SVG,
    "4k-box": MULTI_PATH_SVG,
    "broken": "<svg><path d=",
    "blank": RECT_ONLY_SVG,
}


class ScriptedPrompter:
    """Prompter that answers from pre-loaded queues and records every question."""

    def __init__(
        self,
        selections: list[str | None] | None = None,
        confirmations: list[bool] | None = None,
        texts: list[str | None] | None = None,
    ) -> None:
        self.selections = list(selections or [])
        self.confirmations = list(confirmations or [])
        self.texts = list(texts or [])
        self.asked: list[tuple[str, str, list[Choice] | None]] = []

    def select(self, message: str, options: list[Choice]) -> str | None:
        self.asked.append(("select", message, options))
        return self.selections.pop(0) if self.selections else None

    def confirm(self, message: str, default: bool = False) -> bool:
        self.asked.append(("confirm", message, None))
        return self.confirmations.pop(0) if self.confirmations else default

    def text(self, message: str, default: str = "") -> str | None:
        self.asked.append(("text", message, None))
        return self.texts.pop(0) if self.texts else default

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.asked]


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    icons_dir = tmp_path / "node_modules" / "pixelarticons" / "svg"
    icons_dir.mkdir(parents=True)
    for name, svg in ICON_SET.items():
        (icons_dir / f"{name}.svg").write_text(svg, encoding="utf-8")
    (icons_dir / "README.md").write_text("not an icon", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(project_root: Path) -> IconStore:
    return IconStore(project_root / "node_modules" / "pixelarticons" / "svg")


@pytest.fixture
def web_config() -> ProjectConfig:
    return ProjectConfig(platform="web", outputPath="src/components/icons")


@pytest.fixture
def native_config() -> ProjectConfig:
    return ProjectConfig(platform="native", outputPath="src/components/icons")


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()
