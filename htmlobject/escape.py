"""HTML entity escaping for text and attribute values."""

from __future__ import annotations

from markupsafe import escape


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` in plain text.

    The value is always treated as plain text: objects carrying an
    ``__html__`` method are stringified first, so they are escaped as well.
    """
    return str(escape(str(text)))


__all__ = ["escape_html"]
