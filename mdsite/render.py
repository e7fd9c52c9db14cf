from __future__ import annotations

from pathlib import Path

import markdown

from .errors import TemplateReadError

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]
TITLE_TOKEN = "{{title}}"
CONTENT_TOKEN = "{{content}}"


def render_markdown(body: str, highlight: bool = False) -> str:
    extensions = list(MARKDOWN_EXTENSIONS)
    extension_configs = {}
    if highlight:
        # Inline styles: the site ships no stylesheet for pygments classes.
        extensions.append("codehilite")
        extension_configs["codehilite"] = {"noclasses": True, "guess_lang": False}
    md = markdown.Markdown(extensions=extensions, extension_configs=extension_configs)
    return md.convert(body)


def render_template(template: str, title: str, content: str) -> str:
    """Fill the page placeholders verbatim, ``{{title}}`` before ``{{content}}``.

    A rendered body that happens to contain ``{{title}}`` keeps it as text.
    """
    return template.replace(TITLE_TOKEN, title).replace(CONTENT_TOKEN, content)


def read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise TemplateReadError(f"error reading template {path}: {exc}", path) from exc


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
