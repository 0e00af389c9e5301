"""pix31 command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from pix31 import __version__, console
from pix31.config import PLATFORMS, settings
from pix31.errors import Pix31Error
from pix31.prompts import TerminalPrompter
from pix31.svg.store import IconStore

load_dotenv()


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pix31",
        description="A CLI to add pixelarticons to your React and React Native projects.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-C", "--project-root", type=Path, default=None, help="Project directory (default: cwd)")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")

    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add icons to your project")
    add.add_argument("icons", nargs="*", help="Icon names, e.g. chevron-down")
    add.add_argument("--skip-install", action="store_true", help="Do not run npm install if init is needed")

    init = sub.add_parser("init", help=f"Create {settings.config_file_name} config")
    init.add_argument("--skip-install", action="store_true", help="Do not run npm install")

    sub.add_parser("browse", help="Open pixelarticons website in browser")

    ls = sub.add_parser("list", help="List available icon names")
    ls.add_argument("query", nargs="?", help="Show the closest matches instead of every name")

    gen = sub.add_parser("generate", help="Generate components for the whole icon set")
    gen.add_argument("--platform", choices=sorted(PLATFORMS), default="web")
    gen.add_argument("-o", "--output", type=Path, default=None, help="Output directory (default: <platform>-icons)")

    return parser


def run(args: argparse.Namespace) -> int:
    root = (args.project_root or Path.cwd()).resolve()
    store = IconStore.for_project(root, settings.icons_dir)
    prompter = TerminalPrompter()

    if args.command == "add":
        from pix31.commands.add import add_icons

        summary = add_icons(args.icons, root=root, store=store, prompter=prompter, install=not args.skip_install)
        return 1 if summary is None else 0

    if args.command == "init":
        from pix31.commands.init import initialize_config

        if initialize_config(root, prompter, install=not args.skip_install) is None:
            console.notice("Operation cancelled")
            return 1
        return 0

    if args.command == "browse":
        from pix31.commands.browse import browse

        browse()
        return 0

    if args.command == "list":
        from pix31.commands.list_icons import list_icons

        list_icons(store, args.query)
        return 0

    from pix31.commands.generate import generate_all_icons, print_stats

    default_dir = "react-native-icons" if args.platform == "native" else "react-icons"
    output = args.output or root / default_dir
    print_stats(generate_all_icons(store, output, args.platform))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        return run(args)
    except Pix31Error as e:
        logging.getLogger(__name__).debug("Command failed", exc_info=True)
        console.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
