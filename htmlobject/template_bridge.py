"""Bind markup and HtmlObjects into Jinja2 templates.

Scalars become ``markupsafe.Markup`` holding their fragment text, so an
autoescaping environment prints them unchanged. Sequences and mappings keep
their shape for loops and lookups, and print as the concatenation of their
elements.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

import markupsafe
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .documents import to_fragment
from .markup import MARKUP_TYPES
from .objects import HtmlObject, Mapping, Scalar, Sequence


class TemplateList(list):
    """List attribute value; prints as its elements joined together."""

    def __html__(self) -> str:
        return "".join(str(markupsafe.escape(item)) for item in self)

    def __str__(self) -> str:
        return self.__html__()


class TemplateMap(dict):
    """Map attribute value; prints as its values joined together.

    Jinja2 resolves ``map.key`` through ``getattr`` first, so keys that clash
    with dict methods (``items``, ``keys``...) need ``map['items']``.
    """

    def __html__(self) -> str:
        return "".join(str(markupsafe.escape(value)) for value in self.values())

    def __str__(self) -> str:
        return self.__html__()


TemplateValue = Union[markupsafe.Markup, TemplateList, TemplateMap]


def to_template_value(obj: HtmlObject) -> TemplateValue:
    if isinstance(obj, Scalar):
        return markupsafe.Markup(to_fragment(obj.value).text)
    if isinstance(obj, Sequence):
        return TemplateList(to_template_value(item) for item in obj.items)
    if isinstance(obj, Mapping):
        return TemplateMap((key, to_template_value(value)) for key, value in obj.pairs)
    raise TypeError(f"not a generic object: {obj!r}")


def _bind(value: Any) -> Any:
    if isinstance(value, (Scalar, Sequence, Mapping)):
        return to_template_value(value)
    if isinstance(value, MARKUP_TYPES):
        return markupsafe.Markup(to_fragment(value).text)
    return value


def template_environment(template_dirs: Optional[Iterable[Path]] = None) -> Environment:
    """Create an autoescaping Jinja environment with strict undefined handling."""

    loader = FileSystemLoader(list(template_dirs)) if template_dirs else None
    return Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja", "xml"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_template(
    source: str, *, environment: Optional[Environment] = None, **bindings: Any
) -> str:
    env = environment or template_environment()
    template = env.from_string(source)
    return template.render(**{name: _bind(value) for name, value in bindings.items()})


__all__ = [
    "TemplateList",
    "TemplateMap",
    "TemplateValue",
    "render_template",
    "template_environment",
    "to_template_value",
]
