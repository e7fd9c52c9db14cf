from __future__ import annotations

from pathlib import Path

from .content import ZERO_DATE, extract_metadata, output_name
from .errors import IndexWriteError, PostReadError
from .render import render_markdown, render_template, write_text
from .utils import format_date

SITE_TITLE = "Let's Build"
POSTS_HEADING = "Latest posts"
DEFAULT_INTRO_HTML = "<p>Notes and articles, newest first.</p>"


def build_post(path: Path, template: str, highlight: bool = False) -> tuple[str, str, dict]:
    """Render one markdown file into ``(output_name, html_doc, post)``."""
    try:
        # Undecodable bytes become U+FFFD; only OS-level failures skip the post.
        raw_text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise PostReadError(f"error reading file {path}: {exc}", path) from exc

    body, title, post_date, description = extract_metadata(raw_text, path.name)
    html_content = render_markdown(body, highlight=highlight)
    html_doc = render_template(template, title=title, content=html_content)
    post = {
        "title": title,
        "date": post_date,
        "source": path.name,
        "output": output_name(path.name),
        "description": description,
    }
    return post["output"], html_doc, post


def build_post_list(posts: list[dict]) -> str:
    items = []
    for post in posts:
        if post["date"] == ZERO_DATE:
            continue
        items.append(
            f"<li><strong>{format_date(post['date'])}</strong> - "
            f'<a href="{post["output"]}">{post["title"]}</a>'
            f"<p>{post['description']}</p></li>\n"
        )
    return "".join(items)


def build_index(
    posts: list[dict],
    template: str,
    build_dir: Path,
    site_title: str = SITE_TITLE,
    intro_html: str = DEFAULT_INTRO_HTML,
    posts_heading: str = POSTS_HEADING,
) -> Path:
    """Sort ``posts`` newest first and write ``index.html`` listing the dated ones."""
    posts.sort(key=lambda p: p["date"], reverse=True)
    content = f"{intro_html}<h2>{posts_heading}</h2><ul>\n{build_post_list(posts)}</ul>"
    html_doc = render_template(template, title=site_title, content=content)

    output_path = build_dir / "index.html"
    try:
        write_text(output_path, html_doc)
    except OSError as exc:
        raise IndexWriteError(f"error writing index file: {exc}", output_path) from exc
    print(f"Generated index: {output_path}")
    return output_path
