"""Assemble loaded content into one standalone HTML document."""

from __future__ import annotations

import logging
from typing import List

from .export import resolve_filename
from .loader import LoadedContent
from .models import BundleResult, OutputKind
from .rewriter import rewrite_css, rewrite_html

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT = "<!DOCTYPE html><html><head></head><body></body></html>"
DEFAULT_HTML_STEM = "bundle"


def wrap_script(js: str) -> str:
    """Wrap script text in a strict-mode IIFE so its top-level names stay local."""
    return f"""(function() {{
  'use strict';
  {js}
}})();"""


def combined_css(loaded: LoadedContent) -> str:
    return "\n\n".join(rewrite_css(css, loaded.assets) for css in loaded.stylesheets)


def rewritten_markup(loaded: LoadedContent) -> List[str]:
    return [rewrite_html(markup, loaded.assets) for markup in loaded.markup]


def insert_style(document: str, css: str) -> str:
    if not css:
        return document
    style_tag = f"<style>\n{css}\n</style>"
    if "</head>" in document:
        return document.replace("</head>", f"{style_tag}\n</head>", 1)
    return f"{style_tag}\n{document}"


def insert_script(document: str, js: str) -> str:
    if not js:
        return document
    script_tag = f"<script>\n{js}\n</script>"
    if "</body>" in document:
        return document.replace("</body>", f"{script_tag}\n</body>", 1)
    return f"{document}\n{script_tag}"


def assemble_document(loaded: LoadedContent, base_name: str | None = None) -> BundleResult:
    """Build a standalone HTML page from the loaded files.

    The first markup file is the page; any further markup files are rewritten
    and dropped. Without markup an empty document is used.
    """
    css = combined_css(loaded)
    markup = rewritten_markup(loaded)
    js = "\n\n".join(wrap_script(script) for script in loaded.scripts)

    # an empty first file counts as no page at all
    document = markup[0] if markup and markup[0] else DEFAULT_DOCUMENT
    if len(markup) > 1:
        logger.info("Using the first of %d markup files as the page", len(markup))

    document = insert_style(document, css)
    document = insert_script(document, js)

    return BundleResult(
        content=document,
        filename=resolve_filename(base_name, DEFAULT_HTML_STEM, ".html"),
        output_kind=OutputKind.STANDALONE,
        file_count=loaded.file_count,
    )
