from __future__ import annotations

from pathlib import Path
from typing import Optional


class SiteError(Exception):
    """Base class for build failures. ``path`` names the file or directory involved."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class TemplateNotFoundError(SiteError):
    pass


class TemplateReadError(SiteError):
    pass


class ContentDirNotFoundError(SiteError):
    pass


class ContentListError(SiteError):
    pass


class BuildDirError(SiteError):
    pass


# Per-file failures: build_site reports these and moves on.
class PostReadError(SiteError):
    pass


class PostWriteError(SiteError):
    pass


class IndexWriteError(SiteError):
    pass
