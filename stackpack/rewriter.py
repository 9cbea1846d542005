"""Point asset references in CSS and HTML at inlined data URIs."""

from __future__ import annotations

import re
from typing import Mapping

CSS_URL_RE = re.compile(r"""url\(['"]?([^'"()]+)['"]?\)""", re.IGNORECASE)
HTML_SRC_RE = re.compile(r"""src=['"]([^'"]+)['"]""", re.IGNORECASE)


def bare_filename(path: str) -> str:
    """Last path segment, for both ``/`` and ``\\`` separators."""
    return path.split("/")[-1].split("\\")[-1]


def rewrite_css(css: str, assets: Mapping[str, str]) -> str:
    """Replace ``url(...)`` references whose filename is a known asset.

    Unknown references are kept exactly as written.
    """

    def replace(match: re.Match) -> str:
        filename = bare_filename(match.group(1))
        if filename and filename in assets:
            return f"url('{assets[filename]}')"
        return match.group(0)

    return CSS_URL_RE.sub(replace, css)


def rewrite_html(html: str, assets: Mapping[str, str]) -> str:
    """Replace quoted ``src`` attribute values whose filename is a known asset."""

    def replace(match: re.Match) -> str:
        filename = bare_filename(match.group(1))
        if filename and filename in assets:
            return f'src="{assets[filename]}"'
        return match.group(0)

    return HTML_SRC_RE.sub(replace, html)
