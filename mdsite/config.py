from __future__ import annotations

import html
import sys
from pathlib import Path

from .pages import DEFAULT_INTRO_HTML
from .render import render_markdown
from .utils import MAPPING_ERRORS, load_mapping

CONFIG_FORMATS = {".toml": "toml", ".yml": "yaml", ".yaml": "yaml"}


def load_config(path: Path) -> dict:
    """Read the site config; the format follows the suffix, JSON otherwise."""
    if not path.exists():
        return {}
    fmt = CONFIG_FORMATS.get(path.suffix.lower(), "json")
    try:
        return load_mapping(path.read_text(encoding="utf-8"), fmt)
    except MAPPING_ERRORS as exc:
        print(f"Invalid config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)


def resolve_intro_html(args: object) -> str:
    """Pick the index introduction: inline HTML, then a file, then the default."""
    html_snippet = (getattr(args, "intro_html", "") or "").strip()
    if html_snippet:
        return html_snippet

    file_value = (getattr(args, "intro_file", "") or "").strip()
    if not file_value:
        return DEFAULT_INTRO_HTML
    path = Path(file_value)
    if not path.is_absolute():
        config_path = Path(getattr(args, "config", "site.toml")).resolve()
        path = config_path.parent / path
    if not path.exists():
        print(f"Intro file not found: {path}", file=sys.stderr)
        return DEFAULT_INTRO_HTML

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix in {".html", ".htm"}:
        return text
    if suffix in {".md", ".markdown"}:
        return render_markdown(text)
    escaped = html.escape(text.strip()).replace("\n", "<br>")
    return f"<p>{escaped}</p>"
