"""Opt-in checks for markup trees.

Rendering never calls these; malformed names are rendered as given. The
command line runs them when ``strict`` is enabled.
"""

from __future__ import annotations

import re
from typing import Iterator, List

from .errors import InvalidName, NotSingleRoot
from .markup import Element, EscapedText, HtmlList, Markup, RawHtml, VoidElement

_NAME_RE = re.compile(r"(?:[^\W\d]|:)[\w.:-]*")


def _iter_nodes(node: Markup) -> Iterator[Markup]:
    stack: List[Markup] = [node]
    while stack:
        item = stack.pop()
        yield item
        if isinstance(item, Element):
            stack.append(item.child)
        elif isinstance(item, HtmlList):
            stack.extend(reversed(item.items))


def is_valid_name(name: str) -> bool:
    return _NAME_RE.fullmatch(name) is not None


def check_names(node: Markup) -> None:
    """Raise InvalidName for the first illegal tag or attribute name."""
    for item in _iter_nodes(node):
        if not isinstance(item, (Element, VoidElement)):
            continue
        if not is_valid_name(item.name):
            raise InvalidName(f"invalid tag name: {item.name!r}")
        for attr_name, _ in item.attributes:
            if not is_valid_name(attr_name):
                raise InvalidName(f"invalid attribute name {attr_name!r} on <{item.name}>")


def _top_level(node: Markup) -> List[Markup]:
    if not isinstance(node, HtmlList):
        return [node]
    flat: List[Markup] = []
    for item in node.items:
        flat.extend(_top_level(item))
    return flat


def require_single_root(node: Markup) -> None:
    """Raise NotSingleRoot unless ``node`` is one element, ignoring blank text."""
    roots = [
        item
        for item in _top_level(node)
        if not (isinstance(item, (RawHtml, EscapedText)) and not item.text.strip())
    ]
    if len(roots) != 1:
        raise NotSingleRoot(f"expected one root element, found {len(roots)} top-level nodes")
    if not isinstance(roots[0], (Element, VoidElement)):
        raise NotSingleRoot(f"root must be an element, not {type(roots[0]).__name__}")


__all__ = ["check_names", "is_valid_name", "require_single_root"]
