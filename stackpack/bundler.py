"""Run a bundling job: classify, load, then assemble or synthesize."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Optional

from .assembler import assemble_document
from .classifier import ClassifiedSet, classify
from .component import DEFAULT_COMPONENT_NAME, synthesize_component
from .errors import InvalidOutputKind, UnsupportedFileType
from .loader import load_content
from .models import BundleResult, InputFile, OutputKind

logger = logging.getLogger(__name__)


def parse_output_kind(value: str | OutputKind) -> OutputKind:
    """Accept an OutputKind, its value, or the short aliases ``html`` / ``js``."""
    if isinstance(value, OutputKind):
        return value
    aliases = {"html": OutputKind.STANDALONE, "js": OutputKind.COMPONENT}
    normalized = (value or "").strip().lower()
    if normalized in aliases:
        return aliases[normalized]
    try:
        return OutputKind(normalized)
    except ValueError:
        choices = ", ".join(k.value for k in OutputKind)
        raise InvalidOutputKind(f"Unknown output kind {value!r} (expected one of: {choices})") from None


async def bundle_classified(
    classified: ClassifiedSet,
    output_kind: str | OutputKind = OutputKind.STANDALONE,
    filename: Optional[str] = None,
    component_name: str = DEFAULT_COMPONENT_NAME,
) -> BundleResult:
    kind = parse_output_kind(output_kind)
    loaded = await load_content(classified)
    if kind is OutputKind.COMPONENT:
        result = synthesize_component(loaded, filename, component_name)
    else:
        result = assemble_document(loaded, filename)
    logger.info("Generated %s (%s, %d files)", result.filename, kind.value, result.file_count)
    return result


async def bundle(
    files: Iterable[InputFile],
    output_kind: str | OutputKind = OutputKind.STANDALONE,
    filename: Optional[str] = None,
    component_name: str = DEFAULT_COMPONENT_NAME,
    on_unsupported: Optional[Callable[[UnsupportedFileType], None]] = None,
) -> BundleResult:
    """Bundle ``files`` into one artifact.

    Args:
        files: Input files in the order the caller received them.
        output_kind: ``standalone-document`` or ``isolated-component``.
        filename: Optional custom output filename; the right suffix is added.
        component_name: Class name of the custom element (component output only).
        on_unsupported: Called with a diagnostic for every skipped file.

    Raises:
        ReadFailure: if any file cannot be read.
        InvalidComponentName: if ``component_name`` is not a JS identifier.
        InvalidOutputKind: if ``output_kind`` is not recognized.
    """
    kind = parse_output_kind(output_kind)
    classified = classify(files, on_unsupported)
    return await bundle_classified(classified, kind, filename, component_name)


def bundle_sync(*args, **kwargs) -> BundleResult:
    """Blocking wrapper around :func:`bundle` for callers without an event loop."""
    return asyncio.run(bundle(*args, **kwargs))
