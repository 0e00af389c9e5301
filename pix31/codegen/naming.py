"""Icon file name → component identifier / export statement."""

from __future__ import annotations

import re

NUMBER_WORDS: dict[str, str] = {
    "0": "Zero-",
    "1": "One-",
    "2": "Two-",
    "3": "Three-",
    "4": "Four-",
    "5": "Five-",
    "6": "Six-",
    "7": "Seven-",
    "8": "Eight-",
    "9": "Nine-",
}

_SEGMENT_SPLIT_RE = re.compile(r"[-_]")


def convert_number_to_word(name: str) -> str:
    """Spell out a leading digit: "4g" → "Four-g"."""
    if not name:
        return ""
    word = NUMBER_WORDS.get(name[0])
    if word is None:
        return name
    return word + name[1:]


def to_pascal_case(value: str | None) -> str:
    if not value:
        return ""
    return "".join(part[:1].upper() + part[1:].lower() for part in _SEGMENT_SPLIT_RE.split(value))


def format_svg_file_name_to_pascal_case(filename: str) -> str:
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if base.endswith(".svg"):
        base = base[: -len(".svg")]
    return to_pascal_case(convert_number_to_word(base))


def component_name(icon_name: str) -> str:
    return f"{format_svg_file_name_to_pascal_case(icon_name)}Icon"


# Native re-exports the whole module; web exports the one named component.


def get_react_native_export_line(icon_name: str) -> str:
    return f'export * from "./{icon_name}";'


def get_react_export_line(icon_name: str) -> str:
    return f'export {{ {component_name(icon_name)} }} from "./{icon_name}";'


def get_export_line(platform: str, icon_name: str) -> str:
    if platform == "native":
        return get_react_native_export_line(icon_name)
    return get_react_export_line(icon_name)
