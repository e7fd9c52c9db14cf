from __future__ import annotations

import datetime as dt
import json
from typing import Callable

import yaml

try:
    import tomllib
except ImportError:
    import tomli as tomllib

TRUE_STRINGS = {"1", "true", "yes", "on"}

# Parsers for the text formats used by config files and frontmatter blocks.
MAPPING_LOADERS: dict[str, Callable[[str], object]] = {
    "json": json.loads,
    "toml": tomllib.loads,
    "yaml": yaml.safe_load,
}
MAPPING_ERRORS = (ValueError, yaml.YAMLError)


def load_mapping(text: str, fmt: str) -> dict:
    """Parse ``text`` as ``fmt`` and return a dict.

    Raises one of ``MAPPING_ERRORS`` when the text does not parse or is not a
    mapping. An empty YAML document gives ``{}``.
    """
    data = MAPPING_LOADERS[fmt](text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    return data


def parse_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def format_date(value: dt.date) -> str:
    """``January 15, 2023``: full month name, unpadded day."""
    return f"{value:%B} {value.day}, {value.year}"
