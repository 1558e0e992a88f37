"""Command-line interface for htmlobject."""

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .adapter import object_to_fragment, object_to_full_document, object_to_xml_document, to_markup
from .errors import MarkupError
from .io_utils import read_data, warn, write_text
from .json_bridge import object_to_json_document
from .models import DocumentSettings, load_settings
from .objects import HtmlObject, to_html_object
from .validate import check_names, require_single_root

FORMATS = ("html", "fragment", "xml", "json")


def _load_settings(args: argparse.Namespace) -> DocumentSettings:
    settings = DocumentSettings()
    if args.config:
        config_path = Path(args.config)
        try:
            settings = load_settings(config_path)
        except (OSError, yaml.YAMLError, ValidationError) as exc:
            raise SystemExit(f"Invalid settings file {config_path}: {exc}") from exc
    if args.strict:
        settings = settings.model_copy(update={"strict": True})
    return settings


def _load_object(path: Path) -> HtmlObject:
    try:
        data = read_data(path)
    except FileNotFoundError as exc:
        raise SystemExit(f"Input file not found: {path}") from exc
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as exc:
        raise SystemExit(f"Invalid input file {path}: {exc}") from exc
    if data is None:
        warn(f"{path} is empty; rendering an empty value.")
    return to_html_object(data)


def _check(obj: HtmlObject, output_format: str) -> None:
    node = to_markup(obj)
    try:
        check_names(node)
        if output_format == "xml":
            require_single_root(node)
    except MarkupError as exc:
        raise SystemExit(f"Refusing to render: {exc}") from exc


def render_object(obj: HtmlObject, output_format: str, settings: DocumentSettings) -> str:
    if output_format == "html":
        return object_to_full_document(obj, settings).text
    if output_format == "fragment":
        return object_to_fragment(obj).text
    if output_format == "xml":
        return object_to_xml_document(obj).text
    if output_format == "json":
        return object_to_json_document(obj, settings).text
    raise ValueError(f"unknown output format: {output_format}")


def _handle_render(args: argparse.Namespace) -> None:
    settings = _load_settings(args)
    obj = _load_object(Path(args.input))
    if settings.strict:
        _check(obj, args.format)

    output = render_object(obj, args.format, settings)
    if args.output:
        write_text(args.output, output)
    else:
        sys.stdout.write(output + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlobject",
        description="Render structured data as HTML, XML or HTML-escaped JSON.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML/JSON data file.",
        description=(
            "Load a YAML or JSON document and render it: lists become <ul>, "
            "mappings become <dl>, strings are escaped (YAML '!html' strings are "
            "trusted as markup)."
        ),
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the YAML or JSON data file.",
    )
    render_parser.add_argument(
        "--format",
        choices=FORMATS,
        default="html",
        help="Output shape: full HTML page, bare fragment, XML document or JSON.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        help="File to write; prints to stdout when omitted.",
    )
    render_parser.add_argument(
        "--config",
        help="Optional YAML file with document settings.",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Check names and the XML root element before rendering.",
    )
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main", "render_object"]


if __name__ == "__main__":
    main()
