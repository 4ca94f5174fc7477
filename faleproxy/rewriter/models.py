"""Data models for the rewriter.

Parser backends hand the engine :class:`TextNode` handles tagged with a
:class:`NodeKind`; the engine never inspects parser-specific node classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    CDATA = "cdata"
    DECLARATION = "declaration"
    PROCESSING_INSTRUCTION = "processing_instruction"


class TextNode(Protocol):
    """Handle onto one character-data node of a parsed document."""

    kind: NodeKind

    @property
    def text(self) -> str: ...

    def replace(self, new_text: str) -> None:
        """Swap the node's content for *new_text*, keeping its kind."""
        ...


@dataclass(frozen=True)
class TransformResult:
    """Serialized document plus its (rewritten) title."""

    content: str
    title: str
