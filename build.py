#!/usr/bin/env python3
"""Build ./content into ./build using ./template.html.

Paths and options are fixed and no site config is read; use the ``mdsite``
command for configurable builds.
"""
from __future__ import annotations

from mdsite.cli import generate

if __name__ == "__main__":
    generate()
