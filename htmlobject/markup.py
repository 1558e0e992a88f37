"""Markup tree used as the intermediate form for HTML and XML output.

Nodes are immutable and compare structurally. Nothing is validated when a
node is built: tag and attribute names are the caller's responsibility
(see :mod:`htmlobject.validate` for opt-in checks).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple, Union

Attribute = Tuple[str, str]
Attributes = Tuple[Attribute, ...]


def _freeze_attributes(attributes: Iterable[Tuple[str, str]]) -> Attributes:
    return tuple((name, value) for name, value in attributes)


@dataclass(frozen=True)
class RawHtml:
    """Text already known to be safe markup; emitted verbatim."""

    text: str


@dataclass(frozen=True)
class EscapedText:
    """Plain text, escaped when rendered."""

    text: str


@dataclass(frozen=True)
class Element:
    """A tag with a closing tag wrapping exactly one child node."""

    name: str
    attributes: Attributes = ()
    child: "Markup" = field(default_factory=lambda: HtmlList())

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze_attributes(self.attributes))


@dataclass(frozen=True)
class VoidElement:
    """A tag without children or a closing tag (``br``, ``img``...)."""

    name: str
    attributes: Attributes = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze_attributes(self.attributes))


@dataclass(frozen=True)
class HtmlList:
    """Sibling nodes concatenated without a wrapping tag."""

    items: Tuple["Markup", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


Markup = Union[RawHtml, EscapedText, Element, VoidElement, HtmlList]
MARKUP_TYPES = (RawHtml, EscapedText, Element, VoidElement, HtmlList)


def text(value: str) -> EscapedText:
    return EscapedText(str(value))


def raw(value: str) -> RawHtml:
    return RawHtml(str(value))


def as_markup(value: Any) -> Markup:
    """Coerce a Python value into a Markup node.

    Markup nodes pass through, objects exposing ``__html__`` (for example
    ``markupsafe.Markup``) are trusted as raw markup, and everything else
    becomes escaped text. Booleans use their JSON spelling.
    """
    if isinstance(value, MARKUP_TYPES):
        return value
    if hasattr(value, "__html__"):
        return RawHtml(str(value.__html__()))
    if value is None:
        return EscapedText("")
    if isinstance(value, bool):
        return EscapedText("true" if value else "false")
    return EscapedText(str(value))


__all__ = [
    "Attribute",
    "Attributes",
    "Element",
    "EscapedText",
    "HtmlList",
    "MARKUP_TYPES",
    "Markup",
    "RawHtml",
    "VoidElement",
    "as_markup",
    "raw",
    "text",
]
