"""SVG parser: raw markup → SvgNode tree → ordered path data.

extract_svg_path() is the only entry point the generators use. It never
raises: malformed markup and documents without any path geometry both come
back as None.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from pix31.models.svg_node import SvgNode

logger = logging.getLogger(__name__)

ParseError = ET.ParseError


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _to_node(element: ET.Element) -> SvgNode:
    return SvgNode(
        name=_strip_ns(element.tag),
        attributes=dict(element.attrib),
        children=[_to_node(child) for child in element],
    )


def parse_svg_tree(svg_text: str) -> SvgNode:
    """Parse SVG markup into an SvgNode tree. Raises ParseError on bad markup."""
    root = ET.fromstring(svg_text.strip())
    return _to_node(root)


def find_all_path_elements(node: SvgNode) -> list[SvgNode]:
    """Collect every <path> node, depth-first pre-order."""
    paths: list[SvgNode] = []
    if node.name == "path":
        paths.append(node)

    for child in node.children:
        paths.extend(find_all_path_elements(child))

    return paths


def extract_svg_path(svg_text: str) -> list[str] | None:
    """Return the `d` attribute of every path in document order, or None."""
    try:
        tree = parse_svg_tree(svg_text)
    except ParseError as e:
        logger.error("Failed to parse SVG: %s", e)
        return None

    path_data = [d for d in (p.get("d") for p in find_all_path_elements(tree)) if d is not None]
    if not path_data:
        logger.warning("No path data found in SVG <%s> document", tree.name)
        return None

    logger.debug("Extracted %d paths", len(path_data))
    return path_data
