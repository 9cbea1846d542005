"""Synthesize a self-registering custom element with a shadow root."""

from __future__ import annotations

import re

from .assembler import combined_css, rewritten_markup
from .errors import InvalidComponentName
from .export import resolve_filename
from .loader import LoadedContent
from .models import BundleResult, OutputKind

DEFAULT_COMPONENT_NAME = "StackPackComponent"
DEFAULT_JS_STEM = "component"

IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
CASE_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
BODY_RE = re.compile(r"<body[^>]*>(.*)</body>", re.IGNORECASE | re.DOTALL)

# cannot be used as a class binding
RESERVED_WORDS = frozenset(
    """
    await break case catch class const continue debugger default delete do else enum
    export extends false finally for function if implements import in instanceof
    interface let new null package private protected public return static super
    switch this throw true try typeof var void while with yield
    """.split()
)


def tag_name_for(component_name: str) -> str:
    """``StackPackComponent`` -> ``stack-pack-component``."""
    return CASE_BOUNDARY_RE.sub(r"\1-\2", component_name).lower()


def extract_body(markup: str) -> str:
    """Inner content of the body element if there is one, else the markup unchanged."""
    m = BODY_RE.search(markup)
    return m.group(1) if m else markup


def escape_template_literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def render_script_section(js: str) -> str:
    if not js:
        return "// No scripts to initialize"
    return f"""
    // Execute component scripts in isolated scope
    (function() {{
      'use strict';
      const shadowRoot = this.shadowRoot;
      {js}
    }}).call(this);
    """


def synthesize_component(
    loaded: LoadedContent,
    base_name: str | None = None,
    component_name: str = DEFAULT_COMPONENT_NAME,
) -> BundleResult:
    if not IDENTIFIER_RE.fullmatch(component_name or "") or component_name in RESERVED_WORDS:
        raise InvalidComponentName(f"Component name must be a JavaScript identifier: {component_name!r}")

    css = escape_template_literal(combined_css(loaded))
    markup = escape_template_literal(extract_body("\n\n".join(rewritten_markup(loaded))))
    js = "\n\n".join(loaded.scripts)

    code = f"""class {component_name} extends HTMLElement {{
  constructor() {{
    super();
    this.attachShadow({{ mode: 'open' }});
  }}

  connectedCallback() {{
    this.render();
    this.initializeScripts();
  }}

  render() {{
    const template = document.createElement('template');
    template.innerHTML = `
      <style>
        {css}
      </style>
      {markup}
    `;

    this.shadowRoot.appendChild(template.content.cloneNode(true));
  }}

  initializeScripts() {{
    {render_script_section(js)}
  }}
}}

// Register the custom element
customElements.define('{tag_name_for(component_name)}', {component_name});
"""

    return BundleResult(
        content=code,
        filename=resolve_filename(base_name, DEFAULT_JS_STEM, ".js"),
        output_kind=OutputKind.COMPONENT,
        file_count=loaded.file_count,
    )
