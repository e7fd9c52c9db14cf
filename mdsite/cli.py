from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config, resolve_intro_html
from .content import is_markdown_file
from .errors import (
    BuildDirError,
    ContentDirNotFoundError,
    ContentListError,
    IndexWriteError,
    PostWriteError,
    SiteError,
    TemplateNotFoundError,
)
from .pages import DEFAULT_INTRO_HTML, POSTS_HEADING, SITE_TITLE, build_index, build_post
from .render import read_template, write_text
from .utils import parse_bool

CONTENT_DIR = Path("content")
BUILD_DIR = Path("build")
TEMPLATE_PATH = Path("template.html")


def write_post(output_path: Path, html_doc: str) -> None:
    try:
        write_text(output_path, html_doc)
    except OSError as exc:
        raise PostWriteError(f"Error writing output file {output_path}: {exc}", output_path) from exc


def build_site(
    content_dir: Path,
    build_dir: Path,
    template_path: Path,
    site_title: str = SITE_TITLE,
    intro_html: str = DEFAULT_INTRO_HTML,
    posts_heading: str = POSTS_HEADING,
    highlight: bool = False,
) -> list[dict]:
    """Render every markdown file in ``content_dir`` and write the index.

    Missing inputs or an unusable build directory raise a ``SiteError``.
    Problems with a single file are reported on stderr and that file is
    skipped. Returns the posts that were written.
    """
    content_dir = Path(content_dir)
    build_dir = Path(build_dir)
    template_path = Path(template_path)

    try:
        build_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BuildDirError(f"error creating build directory: {exc}", build_dir) from exc

    if not template_path.exists():
        raise TemplateNotFoundError(f"template file not found at {template_path}", template_path)
    template = read_template(template_path)

    if not content_dir.exists():
        raise ContentDirNotFoundError(f"content directory not found at {content_dir}", content_dir)
    try:
        entries = list(content_dir.iterdir())
    except OSError as exc:
        raise ContentListError(f"error reading content directory: {exc}", content_dir) from exc

    posts = []
    for md_file in entries:
        if md_file.is_dir() or not is_markdown_file(md_file.name):
            continue
        try:
            output_filename, html_doc, post = build_post(md_file, template, highlight=highlight)
            output_path = build_dir / output_filename
            write_post(output_path, html_doc)
        except SiteError as exc:
            print(exc, file=sys.stderr)
            continue
        posts.append(post)
        print(f"Generated: {output_path}")

    if posts:
        try:
            build_index(
                posts,
                template,
                build_dir,
                site_title=site_title,
                intro_html=intro_html,
                posts_heading=posts_heading,
            )
        except IndexWriteError as exc:
            print(f"Error generating index: {exc}", file=sys.stderr)

    return posts


def generate(
    content_dir: Path = CONTENT_DIR,
    build_dir: Path = BUILD_DIR,
    template_path: Path = TEMPLATE_PATH,
    **options,
) -> None:
    """Run ``build_site`` for the console: fatal errors exit with status 1."""
    try:
        build_site(content_dir, build_dir, template_path, **options)
    except SiteError as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
    print("Site generation complete!")


def main(argv=None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))

    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = config.get(key)
        return default if value is None else parse_bool(value)

    parser = argparse.ArgumentParser(description="Build a static HTML site from a folder of Markdown files.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument(
        "--content",
        default=cfg_str("content", str(CONTENT_DIR)),
        help="Directory containing Markdown posts.",
    )
    parser.add_argument("--output", default=cfg_str("output", str(BUILD_DIR)), help="Output directory for the site.")
    parser.add_argument("--template", default=cfg_str("template", str(TEMPLATE_PATH)), help="HTML page template.")
    parser.add_argument("--site-title", default=cfg_str("site_title", SITE_TITLE), help="Title of the index page.")
    parser.add_argument(
        "--posts-heading",
        default=cfg_str("posts_heading", POSTS_HEADING),
        help="Heading above the post list on the index page.",
    )
    parser.add_argument(
        "--intro-html",
        default=cfg_str("intro_html", ""),
        help="Inline HTML shown above the post list.",
    )
    parser.add_argument(
        "--intro-file",
        default=cfg_str("intro_file", ""),
        help="Path to an HTML, Markdown or text file shown above the post list.",
    )
    parser.add_argument(
        "--highlight",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("highlight", False),
        help="Syntax-highlight fenced code blocks with Pygments.",
    )
    args = parser.parse_args(argv)

    generate(
        Path(args.content),
        Path(args.output),
        Path(args.template),
        site_title=args.site_title,
        intro_html=resolve_intro_html(args),
        posts_heading=args.posts_heading,
        highlight=args.highlight,
    )
