"""Document wrappers built on the renderer.

Each wrapper only holds the rendered text; the distinct types keep a full
page, a fragment and an XML document from being mixed up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .escape import escape_html
from .markup import HtmlList, Markup, RawHtml
from .models import DocumentSettings
from .render import render_chunks

XML_PROLOG = "<?xml version='1.0' encoding='utf-8' ?>\n"
DOCTYPE = "<!DOCTYPE html>\n"


@dataclass(frozen=True)
class Fragment:
    """Rendered markup without any document wrapper."""

    text: str

    def __str__(self) -> str:
        return self.text

    def __html__(self) -> str:
        return self.text


@dataclass(frozen=True)
class FullDocument:
    """A complete HTML page."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class XmlDocument:
    """An XML document starting with the XML prolog."""

    text: str

    def __str__(self) -> str:
        return self.text


def to_fragment(node: Markup) -> Fragment:
    return Fragment("".join(render_chunks(node, "html")))


def fragment_to_markup(fragment: Fragment) -> HtmlList:
    """Trust an already rendered fragment as raw markup; nothing is re-escaped."""
    if not fragment.text:
        return HtmlList()
    return HtmlList((RawHtml(fragment.text),))


def to_full_document(node: Markup, settings: Optional[DocumentSettings] = None) -> FullDocument:
    settings = settings or DocumentSettings()
    head = f"<html><head><title>{escape_html(settings.title)}</title></head><body>"
    chunks = [DOCTYPE, head]
    chunks.extend(render_chunks(node, "html"))
    chunks.append("</body></html>")
    return FullDocument("".join(chunks))


def to_xml_document(node: Markup) -> XmlDocument:
    """Render ``node`` as an XML document.

    The node must start with a single element for the result to be
    well-formed XML. This is not checked here; see
    :func:`htmlobject.validate.require_single_root`.
    """
    chunks = [XML_PROLOG]
    chunks.extend(render_chunks(node, "xml"))
    return XmlDocument("".join(chunks))


def cdata(node: Markup) -> HtmlList:
    """Wrap ``node`` in a CDATA section for XML output."""
    return HtmlList((RawHtml("<![CDATA["), node, RawHtml("]]>")))


__all__ = [
    "DOCTYPE",
    "Fragment",
    "FullDocument",
    "XML_PROLOG",
    "XmlDocument",
    "cdata",
    "fragment_to_markup",
    "to_fragment",
    "to_full_document",
    "to_xml_document",
]
