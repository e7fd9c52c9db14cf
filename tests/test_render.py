import datetime as dt

import pytest

from mdsite.render import render_markdown, render_template
from mdsite.utils import MAPPING_ERRORS, format_date, load_mapping, parse_bool


def test_render_template_replaces_every_placeholder(template):
    output = render_template(template, title="Test Title", content="<p>Body</p>")
    assert "{{title}}" not in output
    assert "{{content}}" not in output
    assert output.count("Test Title") == 2
    assert "<div><p>Body</p></div>" in output


def test_render_template_inserts_values_verbatim():
    output = render_template("<title>{{title}}</title>", title="<b>A & B</b>", content="")
    assert output == "<title><b>A & B</b></title>"


def test_render_template_substitutes_content_last():
    output = render_template("{{title}}|{{content}}", title="T", content="{{title}}")
    assert output == "T|{{title}}"


def test_render_markdown_standard_syntax():
    html_doc = render_markdown("# Heading\nThis is a test.")
    assert "<h1>Heading</h1>" in html_doc
    assert "<p>This is a test.</p>" in html_doc


def test_render_markdown_fenced_code_without_highlight():
    html_doc = render_markdown("```python\ndef f():\n    pass\n```")
    assert 'class="language-python"' in html_doc
    assert "<span style=" not in html_doc


def test_render_markdown_highlight_uses_inline_styles():
    html_doc = render_markdown("```python\ndef f():\n    pass\n```", highlight=True)
    assert "<span style=" in html_doc


def test_format_date():
    assert format_date(dt.date(2023, 1, 15)) == "January 15, 2023"
    assert format_date(dt.date(2023, 3, 5)) == "March 5, 2023"


def test_parse_bool():
    assert parse_bool("yes")
    assert parse_bool(1)
    assert not parse_bool("off")
    assert not parse_bool(None)


@pytest.mark.parametrize(
    "text, fmt, expected",
    [
        ('title = "T"', "toml", {"title": "T"}),
        ("title: T", "yaml", {"title": "T"}),
        ("", "yaml", {}),
        ('{"title": "T"}', "json", {"title": "T"}),
    ],
)
def test_load_mapping(text, fmt, expected):
    assert load_mapping(text, fmt) == expected


@pytest.mark.parametrize("text, fmt", [("- a", "yaml"), ("[1]", "json"), ("title = ", "toml")])
def test_load_mapping_rejects_bad_input(text, fmt):
    with pytest.raises(MAPPING_ERRORS):
        load_mapping(text, fmt)
