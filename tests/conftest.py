from __future__ import annotations

from pathlib import Path

import pytest

TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{{title}}</title>
</head>
<body>
    <h1>{{title}}</h1>
    <div>{{content}}</div>
    <footer>Generated by mdsite</footer>
</body>
</html>"""

POSTS = {
    "test-with-frontmatter.md": "---\ntitle: Test Title\n---\n# Heading\nThis is a test.",
    "test-without-frontmatter.md": "# No Frontmatter\nThis is a test without frontmatter.",
    "2023-01-15-first-post.md": "---\ntitle: First Post\n---\n# First Post\nThis is the first test post with a date.",
    "2023-03-20-second-post.md": "---\ntitle: Second Post\n---\n# Second Post\nThis is the second test post with a date.",
    "2023-02-10-third-post.md": "# Third Post\nThis is the third test post with a date but no frontmatter.",
    "test-with-description.md": (
        "---\n"
        "title: Test Title with Description\n"
        "description: This is a custom description from frontmatter.\n"
        "---\n"
        "# Heading\n"
        "This is a test with a custom description in frontmatter."
    ),
}


@pytest.fixture
def template() -> str:
    return TEMPLATE


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A project root holding ``content/``, ``build/`` and ``template.html``."""
    content_dir = tmp_path / "content"
    content_dir.mkdir()
    (tmp_path / "build").mkdir()
    (tmp_path / "template.html").write_text(TEMPLATE, encoding="utf-8")
    for name, text in POSTS.items():
        (content_dir / name).write_text(text, encoding="utf-8")
    return tmp_path
