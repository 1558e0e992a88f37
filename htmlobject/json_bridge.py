"""JSON output for markup and HtmlObjects.

Markup becomes a JSON string holding its HTML-escaped fragment text, which
can be dropped straight into a page from script code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .documents import to_fragment
from .io_utils import ordered_json_dumps
from .markup import Markup
from .models import DocumentSettings
from .objects import HtmlObject, Mapping, Scalar, Sequence


@dataclass(frozen=True)
class JsonDocument:
    """Serialized JSON text."""

    text: str

    def __str__(self) -> str:
        return self.text


def markup_to_json_scalar(node: Markup) -> str:
    return to_fragment(node).text


def object_to_json(obj: HtmlObject) -> Any:
    """Map an HtmlObject onto JSON values, keeping mapping order.

    With duplicate keys the first occurrence fixes the position and the last
    value wins.
    """
    if isinstance(obj, Scalar):
        return markup_to_json_scalar(obj.value)
    if isinstance(obj, Sequence):
        items: List[Any] = [object_to_json(item) for item in obj.items]
        return items
    if isinstance(obj, Mapping):
        members: Dict[str, Any] = {}
        for key, value in obj.pairs:
            members[key] = object_to_json(value)
        return members
    raise TypeError(f"not a generic object: {obj!r}")


def _settings_indent(settings: Optional[DocumentSettings]) -> Optional[int]:
    return settings.json_indent if settings else None


def object_to_json_document(
    obj: HtmlObject, settings: Optional[DocumentSettings] = None
) -> JsonDocument:
    return JsonDocument(ordered_json_dumps(object_to_json(obj), indent=_settings_indent(settings)))


def markup_to_json_document(
    node: Markup, settings: Optional[DocumentSettings] = None
) -> JsonDocument:
    return JsonDocument(
        ordered_json_dumps(markup_to_json_scalar(node), indent=_settings_indent(settings))
    )


__all__ = [
    "JsonDocument",
    "markup_to_json_document",
    "markup_to_json_scalar",
    "object_to_json",
    "object_to_json_document",
]
