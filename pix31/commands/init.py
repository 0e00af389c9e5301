"""`pix31 init`: create pix31.json and install the npm packages icons need."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

import typer

from pix31 import console
from pix31.config import PLATFORMS, ProjectConfig, config_path, settings, write_config
from pix31.prompts import Choice, Prompter

logger = logging.getLogger(__name__)

LIB_NAME = "pix31"

_WEB_FRAMEWORK_DEPS = ("react", "react-dom", "next", "gatsby", "vite", "webpack")


def _package_deps(root: Path) -> dict[str, str] | None:
    package_path = root / "package.json"
    if not package_path.exists():
        return None
    try:
        package = json.loads(package_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", package_path, e)
        return None
    if not isinstance(package, dict):
        logger.warning("Ignoring %s: not a JSON object", package_path)
        return None
    return {**package.get("dependencies", {}), **package.get("devDependencies", {})}


def detect_framework(root: Path) -> str | None:
    """Guess the platform from package.json dependencies."""
    deps = _package_deps(root)
    if not deps:
        return None
    if "react-native" in deps:
        return "native"
    if any(dep in deps for dep in _WEB_FRAMEWORK_DEPS):
        return "web"
    return None


def check_package_exists(root: Path, package_name: str) -> bool:
    deps = _package_deps(root)
    return bool(deps and deps.get(package_name))


def missing_dependencies(root: Path, platform: str) -> tuple[list[str], list[str]]:
    """(dependencies, devDependencies) that still need installing."""
    if platform == "native":
        wanted, wanted_dev = ["react-native-svg", "pixelarticons"], []
    else:
        wanted, wanted_dev = ["tailwind-merge", "tailwindcss-animate", "pixelarticons"], ["tailwindcss"]

    missing = [p for p in wanted if not check_package_exists(root, p)]
    missing_dev = [p for p in wanted_dev if not check_package_exists(root, p)]
    return missing, missing_dev


def _npm_install(root: Path, packages: list[str], dev: bool = False) -> None:
    cmd = ["npm", "install", *(["-D"] if dev else []), *packages]
    label = "dev dependencies" if dev else "dependencies"
    console.info(f"Installing {label}: {', '.join(packages)}...")
    logger.debug("Running %s in %s", cmd, root)
    try:
        subprocess.run(cmd, cwd=root, check=True, capture_output=True)
    except (OSError, subprocess.CalledProcessError):
        console.error(f"Failed to install {label}")
        raise
    console.success(f"Installed {label}")


def install_dependencies(root: Path, platform: str) -> None:
    missing, missing_dev = missing_dependencies(root, platform)
    if missing:
        _npm_install(root, missing)
    if missing_dev:
        _npm_install(root, missing_dev, dev=True)


def print_init_success(config: ProjectConfig) -> None:
    console.info()
    console.info(f"Thanks for choosing {LIB_NAME} to manage your pixelarticons")
    console.info()
    console.info(f"You should be set up to start using {LIB_NAME} now!")
    console.info()
    console.info("We have added a couple of things to help you out:")
    console.info(f"- {settings.config_file_name} contains your icon configuration")
    console.info(f"- {config.output_path} will contain your icon components")
    console.info()
    typer.echo("Commands you can run:")
    typer.echo(f"  {LIB_NAME} browse                     Open pixelarticons website in browser")
    typer.echo(f"  {LIB_NAME} add [icon-1] [icon-2] ...  Add icons to your project")


def initialize_config(root: Path, prompter: Prompter, install: bool = True) -> ProjectConfig | None:
    """Interactively create pix31.json. Returns None if the user backs out."""
    if config_path(root).exists():
        overwrite = prompter.confirm(
            f"{settings.config_file_name} already exists. Would you like to overwrite it?",
            default=False,
        )
        if not overwrite:
            return None

    platform = detect_framework(root)
    if platform is None:
        platform = prompter.select(
            "Select your platform",
            [Choice(value="web", label=PLATFORMS["web"]), Choice(value="native", label=PLATFORMS["native"])],
        )
        if platform not in PLATFORMS:
            return None
    else:
        logger.info("Detected %s project", platform)

    output_path = prompter.text("What directory should the icons be added to?", default=settings.default_output_path)
    if not output_path or not output_path.strip():
        return None

    config = ProjectConfig(platform=platform, output_path=output_path.strip())

    try:
        if install:
            install_dependencies(root, config.platform)
        write_config(root, config)
    except (OSError, subprocess.CalledProcessError) as e:
        logger.error("Failed to initialize config: %s", e)
        console.error(f"Failed to initialize config: {e}")
        return None

    print_init_success(config)
    return config
