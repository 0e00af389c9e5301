"""Parsed SVG element tree."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SvgNode(BaseModel):
    """One element of a parsed SVG document, namespace stripped from the tag."""

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[SvgNode] = Field(default_factory=list)

    def get(self, attr: str) -> str | None:
        return self.attributes.get(attr)


SvgNode.model_rebuild()
