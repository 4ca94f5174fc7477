"""HTML parser/serializer backends.

The engine talks to a parser only through :class:`HtmlBackend`.  The default
:class:`SoupBackend` wraps BeautifulSoup with the stdlib ``html.parser`` tree
builder, which keeps the serialized output close to the input (no implicit
``<html>``/``<body>`` wrappers, attribute order preserved).
"""

from __future__ import annotations

from typing import Any, Protocol

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PreformattedString,
    ProcessingInstruction,
    Tag,
)

from faleproxy.rewriter.models import NodeKind, TextNode


class HtmlBackend(Protocol):
    def parse(self, html: str) -> Any: ...

    def serialize(self, document: Any) -> str: ...

    def query_text(self, document: Any) -> list[TextNode]:
        """Return handles for the character-data nodes of the document body.

        Nodes inside the document ``<title>`` are excluded; it is handled through
        :meth:`get_title` / :meth:`set_title`.
        """
        ...

    def get_title(self, document: Any) -> str: ...

    def set_title(self, document: Any, title: str) -> None: ...


# ---------------------------------------------------------------------------
# BeautifulSoup implementation
# ---------------------------------------------------------------------------

# Subclasses listed before their bases.
_PREFORMATTED_KINDS: list[tuple[type, NodeKind]] = [
    (Comment, NodeKind.COMMENT),
    (Doctype, NodeKind.DOCTYPE),
    (CData, NodeKind.CDATA),
    (ProcessingInstruction, NodeKind.PROCESSING_INSTRUCTION),
    (Declaration, NodeKind.DECLARATION),
]


def _kind_of(node: NavigableString) -> NodeKind:
    if isinstance(node, PreformattedString):
        for cls, kind in _PREFORMATTED_KINDS:
            if isinstance(node, cls):
                return kind
        return NodeKind.DECLARATION
    # Plain strings plus Script/Stylesheet/TemplateString raw text.
    return NodeKind.TEXT


def _document_title(document: BeautifulSoup) -> Tag | None:
    """Return the page's own <title>, ignoring <svg>/<math> titles in the body."""
    for tag in document.find_all("title"):
        if tag.find_parent(["svg", "math"]) is None:
            return tag
    return None


class SoupTextNode:
    """:class:`TextNode` over a ``bs4`` :class:`NavigableString`."""

    def __init__(self, node: NavigableString) -> None:
        self._node = node
        self.kind = _kind_of(node)

    @property
    def text(self) -> str:
        return str(self._node)

    def replace(self, new_text: str) -> None:
        replacement = type(self._node)(new_text)
        self._node.replace_with(replacement)
        self._node = replacement

    def __repr__(self) -> str:
        return f"SoupTextNode({self.kind.value}, {self.text!r})"


class SoupBackend:
    """:class:`HtmlBackend` backed by BeautifulSoup."""

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.features)

    def serialize(self, document: BeautifulSoup) -> str:
        return document.decode()

    def query_text(self, document: BeautifulSoup) -> list[TextNode]:
        body = document.body
        root = body if body is not None else document
        title_tag = _document_title(document)
        nodes: list[TextNode] = []
        for descendant in root.descendants:
            if not isinstance(descendant, NavigableString):
                continue
            if title_tag is not None and descendant.find_parent("title") is title_tag:
                continue
            # Fragments without <body>: everything outside <head> counts.
            if body is None and descendant.find_parent("head") is not None:
                continue
            nodes.append(SoupTextNode(descendant))
        return nodes

    def get_title(self, document: BeautifulSoup) -> str:
        title_tag = _document_title(document)
        return title_tag.get_text() if title_tag is not None else ""

    def set_title(self, document: BeautifulSoup, title: str) -> None:
        title_tag = _document_title(document)
        if title_tag is not None:
            title_tag.string = title
