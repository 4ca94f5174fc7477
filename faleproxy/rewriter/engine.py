"""Text-substitution engine: rewrite the target word in visible text only.

The replacement is two literal passes, exact-case first and lowercase second::

    "Yale" -> "Fale"
    "yale" -> "fale"

Any other casing (``YALE``, ``yAle``) is left alone.  Attribute values are
never visited because the backend only yields character-data nodes, and
only nodes tagged :attr:`NodeKind.TEXT` are rewritten.
"""

from __future__ import annotations

import logging

from faleproxy.rewriter.backend import HtmlBackend, SoupBackend
from faleproxy.rewriter.models import NodeKind, TransformResult

logger = logging.getLogger(__name__)

TARGET_WORD = "Yale"
REPLACEMENT_WORD = "Fale"

# Applied in order, each as a plain ``str.replace``.
REPLACEMENT_RULES: tuple[tuple[str, str], ...] = (
    (TARGET_WORD, REPLACEMENT_WORD),
    (TARGET_WORD.lower(), REPLACEMENT_WORD.lower()),
)


def replace_target_word(text: str) -> str:
    """Return *text* with both replacement passes applied."""
    for pattern, replacement in REPLACEMENT_RULES:
        text = text.replace(pattern, replacement)
    return text


def transform(html: str, backend: HtmlBackend | None = None) -> TransformResult:
    """Rewrite the target word in the text nodes and title of *html*.

    Args:
        html: The document to transform.  Malformed markup is recovered by
            the backend's parser; nothing is raised here.
        backend: Parser/serializer to use.  Defaults to :class:`SoupBackend`.

    Returns:
        The serialized document and its rewritten title (``""`` when the
        document has no ``<title>``).
    """
    backend = backend or SoupBackend()
    document = backend.parse(html)

    changed = 0
    for node in backend.query_text(document):
        # Comments, doctypes and declarations stay verbatim.
        if node.kind is not NodeKind.TEXT:
            continue
        original = node.text
        rewritten = replace_target_word(original)
        if rewritten != original:
            node.replace(rewritten)
            changed += 1

    original_title = backend.get_title(document)
    title = replace_target_word(original_title)
    if title != original_title:
        backend.set_title(document, title)

    logger.debug("Rewrote %d text node(s); title changed: %s", changed, title != original_title)
    return TransformResult(content=backend.serialize(document), title=title)
