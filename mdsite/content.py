from __future__ import annotations

import datetime as dt
import re
from pathlib import PurePath

from .utils import MAPPING_ERRORS, load_mapping

DATE_FMT = "%Y-%m-%d"
DATED_STEM_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})-(.+)$")
MARKDOWN_SUFFIXES = (".md", ".markdown")
# Opening line -> format; the block closes on the same line.
FRONT_MATTER_FORMATS = {"---": "yaml", "+++": "toml", ";;;": "json"}
DESCRIPTION_LIMIT = 150
STRIPPED_CHARS = "#*_"

# Undated posts carry this date; they get a page but no index entry.
ZERO_DATE = dt.date.min


def is_markdown_file(name: str) -> bool:
    return name.endswith(MARKDOWN_SUFFIXES)


def source_stem(filename: str) -> str:
    for suffix in MARKDOWN_SUFFIXES:
        if filename.endswith(suffix):
            return filename[: -len(suffix)]
    return PurePath(filename).stem


def output_name(filename: str) -> str:
    return source_stem(filename) + ".html"


def parse_front_matter(text: str) -> tuple[dict, str]:
    """Split a leading metadata block from the body.

    The block is YAML between ``---`` lines, TOML between ``+++`` lines or
    JSON between ``;;;`` lines. A missing block gives ``({}, text)``. So does
    a malformed one (a parse error, a non-mapping document or no closing
    delimiter): the whole text is then treated as body.
    """
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    delim = lines[0].strip() if lines else ""
    fmt = FRONT_MATTER_FORMATS.get(delim)
    if fmt is None:
        return {}, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == delim:
            end = i
            break
    if end is None:
        return {}, clean_text

    try:
        meta = load_mapping("\n".join(lines[1:end]), fmt)
    except MAPPING_ERRORS:
        return {}, clean_text
    body = "\n".join(lines[end + 1 :])
    return meta, body


def meta_text(meta: dict, key: str) -> str:
    value = meta.get(key)
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def parse_filename(filename: str) -> tuple[dt.date, str]:
    stem = source_stem(filename)
    match = DATED_STEM_RE.match(stem)
    if not match:
        return ZERO_DATE, stem.replace("-", " ")
    try:
        post_date = dt.datetime.strptime(match.group(1), DATE_FMT).date()
    except ValueError:
        post_date = ZERO_DATE
    return post_date, match.group(2).replace("-", " ")


def extract_description(body: str) -> str:
    text = body
    for char in STRIPPED_CHARS:
        text = text.replace(char, "")

    for paragraph in text.split("\n\n"):
        paragraph = paragraph.strip()
        if paragraph:
            if len(paragraph) > DESCRIPTION_LIMIT:
                return paragraph[: DESCRIPTION_LIMIT - 3] + "..."
            return paragraph

    if len(text) > DESCRIPTION_LIMIT:
        return text[: DESCRIPTION_LIMIT - 3].strip() + "..."
    return text.strip()


def extract_metadata(text: str, filename: str) -> tuple[str, str, dt.date, str]:
    """Resolve ``(body, title, date, description)`` for one markdown document."""
    meta, body = parse_front_matter(text)
    post_date, filename_title = parse_filename(filename)
    title = meta_text(meta, "title") or filename_title
    description = meta_text(meta, "description") or extract_description(body)
    return body, title, post_date, description
