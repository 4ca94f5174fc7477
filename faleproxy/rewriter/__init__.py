"""Rewriter package: HTML parsing backends and the text-substitution engine."""

from faleproxy.rewriter.backend import HtmlBackend, SoupBackend
from faleproxy.rewriter.engine import replace_target_word, transform
from faleproxy.rewriter.models import NodeKind, TextNode, TransformResult

__all__ = [
    "transform",
    "replace_target_word",
    "HtmlBackend",
    "SoupBackend",
    "NodeKind",
    "TextNode",
    "TransformResult",
]
