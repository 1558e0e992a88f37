"""Turn generic object trees into markup.

Sequences become ``<ul>`` lists and mappings become ``<dl>`` definition
lists with escaped keys. The policy is fixed.
"""

from __future__ import annotations

from typing import List, Optional

from .documents import (
    Fragment,
    FullDocument,
    XmlDocument,
    to_fragment,
    to_full_document,
    to_xml_document,
)
from .markup import Element, EscapedText, HtmlList, Markup
from .models import DocumentSettings
from .objects import HtmlObject, Mapping, Scalar, Sequence


def to_markup(obj: HtmlObject) -> Markup:
    if isinstance(obj, Scalar):
        return obj.value
    if isinstance(obj, Sequence):
        return Element("ul", (), HtmlList(Element("li", (), to_markup(item)) for item in obj.items))
    if isinstance(obj, Mapping):
        entries: List[Markup] = []
        for key, value in obj.pairs:
            entries.append(Element("dt", (), EscapedText(key)))
            entries.append(Element("dd", (), to_markup(value)))
        return Element("dl", (), HtmlList(entries))
    raise TypeError(f"not a generic object: {obj!r}")


def object_to_fragment(obj: HtmlObject) -> Fragment:
    return to_fragment(to_markup(obj))


def object_to_full_document(
    obj: HtmlObject, settings: Optional[DocumentSettings] = None
) -> FullDocument:
    return to_full_document(to_markup(obj), settings)


def object_to_xml_document(obj: HtmlObject) -> XmlDocument:
    return to_xml_document(to_markup(obj))


__all__ = ["object_to_fragment", "object_to_full_document", "object_to_xml_document", "to_markup"]
