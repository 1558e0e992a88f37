"""Pydantic models for rendering settings."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE = "HtmlDoc (autogenerated)"


class DocumentSettings(BaseModel):
    """Knobs for the document wrappers and the command-line renderer."""

    title: str = Field(
        DEFAULT_TITLE, description="Title placed in the head of full HTML documents."
    )
    json_indent: Optional[int] = Field(
        None,
        alias="jsonIndent",
        ge=0,
        description="Indentation for JSON documents; compact output when unset.",
    )
    strict: bool = Field(
        False,
        description=(
            "Check tag/attribute names and the XML root element before rendering "
            "from the command line."
        ),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


def load_settings(path: Path) -> DocumentSettings:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return DocumentSettings.model_validate(data)


__all__ = ["DEFAULT_TITLE", "DocumentSettings", "load_settings"]
