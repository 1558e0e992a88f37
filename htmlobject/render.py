"""Flatten a markup tree into text chunks."""

from __future__ import annotations

from typing import Callable, List, Literal

from .escape import escape_html
from .markup import Attributes, Element, EscapedText, HtmlList, Markup, RawHtml, VoidElement

RenderMode = Literal["html", "xml"]
WriterFn = Callable[[str], object]


def _open_tag_tail(attributes: Attributes, close: str) -> str:
    parts = [f' {escape_html(name)}="{escape_html(value)}"' for name, value in attributes]
    parts.append(close)
    return "".join(parts)


def write_markup(node: Markup, writer: WriterFn, mode: RenderMode = "html") -> None:
    """Emit ``node`` chunk by chunk through ``writer``.

    Pending work is kept on an explicit stack: a container pushes its
    children (and its closing tag) so that everything after the current node
    is already queued. Each chunk is produced once, so the cost is linear in
    the size of the output and deep trees do not touch the recursion limit.
    """
    void_close = "/>" if mode == "xml" else ">"
    stack: List[Markup] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, RawHtml):
            writer(item.text)
        elif isinstance(item, EscapedText):
            writer(escape_html(item.text))
        elif isinstance(item, Element):
            writer("<" + item.name)
            writer(_open_tag_tail(item.attributes, ">"))
            stack.append(RawHtml(f"</{item.name}>"))
            stack.append(item.child)
        elif isinstance(item, VoidElement):
            writer("<" + item.name)
            writer(_open_tag_tail(item.attributes, void_close))
        elif isinstance(item, HtmlList):
            stack.extend(reversed(item.items))
        else:
            raise TypeError(f"not a markup node: {item!r}")


def render_chunks(node: Markup, mode: RenderMode = "html") -> List[str]:
    chunks: List[str] = []
    write_markup(node, chunks.append, mode)
    return chunks


def render_text(node: Markup, mode: RenderMode = "html") -> str:
    return "".join(render_chunks(node, mode))


__all__ = ["RenderMode", "WriterFn", "render_chunks", "render_text", "write_markup"]
