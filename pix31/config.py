"""Tool settings from environment variables + the per-project pix31.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings

from pix31.errors import ConfigError

logger = logging.getLogger(__name__)

Platform = Literal["web", "native"]

PLATFORMS: dict[str, str] = {
    "native": "React Native",
    "web": "React",
}


class Settings(BaseSettings):
    log_level: str = "warning"

    # Source icon set, relative to the project root
    icons_dir: str = "node_modules/pixelarticons/svg"

    config_file_name: str = "pix31.json"
    default_output_path: str = "src/components/icons"
    browse_url: str = "https://pixelarticons.com/"

    model_config = {"env_prefix": "PIX31_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


class ProjectConfig(BaseModel):
    """Contents of pix31.json. Owned by the host project."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    platform: Platform = "web"
    output_path: str = Field(..., alias="outputPath", min_length=1)

    @property
    def platform_label(self) -> str:
        return PLATFORMS[self.platform]


def config_path(root: Path) -> Path:
    return root / settings.config_file_name


def read_config(root: Path) -> ProjectConfig | None:
    """Load pix31.json from ``root``.

    Returns None when the file does not exist. A file that exists but cannot
    be read or validated raises ConfigError.
    """
    path = config_path(root)
    if not path.exists():
        return None

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return ProjectConfig.model_validate(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning("Invalid config at %s: %s", path, e)
        raise ConfigError(f"{path.name} is not a valid config file") from e


def write_config(root: Path, config: ProjectConfig) -> Path:
    path = config_path(root)
    path.write_text(json.dumps(config.model_dump(by_alias=True), indent=2), encoding="utf-8")
    logger.info("Wrote config to %s", path)
    return path
