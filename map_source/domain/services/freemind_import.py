"""Freemind (.mm) import into the map document shape.

Pure domain logic, standard library only. Broken input never raises: it
degrades to an empty root idea and a warning is logged, so a foreign file
that cannot be read still opens (read-only) instead of failing the load.
"""

from __future__ import annotations

import itertools
import logging
from xml.etree import ElementTree

from map_source.domain.types import Document

logger = logging.getLogger(__name__)


def empty_idea() -> Document:
    return {"id": 1, "title": ""}


def freemind_to_document(xml: str | bytes) -> Document:
    """Convert Freemind XML to a document rooted at the map's first node.

    - title:  TEXT attribute, or the plain text of a NODE richcontent block
    - ideas:  children keyed by rank in document order, negative on the left
    - ids:    integers from 1, assigned depth first
    - attr:   ``collapsed`` for folded parents, ``style.background`` colours
    """
    try:
        root = ElementTree.fromstring(xml)
    except ElementTree.ParseError as ex:
        logger.warning("Freemind content could not be parsed: %s", ex)
        return empty_idea()

    node = root.find("node") if root.tag == "map" else root.find("./map/node")
    if node is None:
        logger.warning("Freemind content has no root node (root element <%s>)", root.tag)
        return empty_idea()

    return _tree_to_ideas(node)


def _tree_to_ideas(root: ElementTree.Element) -> Document:
    # Explicit stack: nesting depth is bounded by the file, not the interpreter.
    ids = itertools.count(1)
    document: Document = {}
    pending: list[tuple[ElementTree.Element, dict[str, Document] | None, str]] = [
        (root, None, "")
    ]
    while pending:
        node, siblings, key = pending.pop()
        idea = _node_to_idea(node, next(ids))
        if siblings is None:
            document = idea
        else:
            siblings[key] = idea

        children = node.findall("node")
        if not children:
            continue
        ideas: dict[str, Document] = {}
        idea["ideas"] = ideas
        if node.get("FOLDED") == "true":
            idea.setdefault("attr", {})["collapsed"] = True
        ranked = []
        for rank, child in enumerate(children, start=1):
            side = -1 if child.get("POSITION") == "left" else 1
            ranked.append((child, ideas, str(side * rank)))
        # reversed so the first child is numbered first
        pending.extend(reversed(ranked))
    return document


def _node_to_idea(node: ElementTree.Element, idea_id: int) -> Document:
    idea: Document = {"id": idea_id, "title": _node_title(node)}
    background = node.get("BACKGROUND_COLOR")
    if background:
        idea["attr"] = {"style": {"background": background}}
    return idea


def _node_title(node: ElementTree.Element) -> str:
    text = node.get("TEXT")
    if text is not None:
        return text
    for rich in node.findall("richcontent"):
        if rich.get("TYPE", "NODE") == "NODE":
            return " ".join("".join(rich.itertext()).split())
    return ""
