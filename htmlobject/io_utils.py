"""Utility helpers for JSON/YAML IO and diagnostics."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional, Union

import markupsafe
import yaml

PathLike = Union[str, Path]


class DataLoader(yaml.SafeLoader):
    """Safe YAML loader that understands ``!html`` for trusted markup strings."""


def _construct_html(loader: yaml.SafeLoader, node: yaml.Node) -> markupsafe.Markup:
    return markupsafe.Markup(loader.construct_scalar(node))


DataLoader.add_constructor("!html", _construct_html)


def ordered_json_dumps(obj: object, *, indent: Optional[int] = None) -> str:
    """Serialize JSON keeping the caller's key order."""
    if indent is None:
        return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(obj, ensure_ascii=False, indent=indent)


def read_data(path: Path) -> Any:
    """Load a JSON or YAML document; anything but ``.json`` goes through YAML."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.load(text, Loader=DataLoader)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
