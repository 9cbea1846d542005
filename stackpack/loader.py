"""Read input files as text or as self-describing data URIs."""

from __future__ import annotations

import asyncio
import base64
import logging
import mimetypes
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .classifier import ClassifiedSet
from .errors import ReadFailure
from .models import InputFile
from .rewriter import bare_filename

logger = logging.getLogger(__name__)

# mimetypes tables vary by platform for these
MIME_OVERRIDES = {
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
    ".bmp": "image/bmp",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
}
DEFAULT_MIME = "application/octet-stream"

AssetTable = Dict[str, str]


@dataclass
class LoadedContent:
    """Texts of one run, per category in input order, plus the asset table."""

    markup: List[str] = field(default_factory=list)
    stylesheets: List[str] = field(default_factory=list)
    scripts: List[str] = field(default_factory=list)
    assets: AssetTable = field(default_factory=dict)
    file_count: int = 0


def detect_mime(name: str) -> str:
    suffix = "." + name.rsplit(".", 1)[-1].lower() if "." in name else ""
    if suffix in MIME_OVERRIDES:
        return MIME_OVERRIDES[suffix]
    mime, _ = mimetypes.guess_type(bare_filename(name))
    return mime or DEFAULT_MIME


def _read(file: InputFile) -> bytes:
    try:
        return file.read_bytes()
    except Exception as e:
        raise ReadFailure(file.name, str(e)) from e


def load_text(file: InputFile) -> str:
    return _read(file).decode("utf-8", errors="replace")


def load_encoded(file: InputFile) -> str:
    """Return ``data:<mime>;base64,<payload>`` for the file's bytes."""
    payload = base64.b64encode(_read(file)).decode("ascii")
    return f"data:{detect_mime(file.name)};base64,{payload}"


def build_asset_table(files: Iterable[InputFile], encoded: Iterable[str]) -> AssetTable:
    """Map bare filenames to data URIs. A later duplicate name replaces the earlier entry."""
    table: AssetTable = {}
    for f, data in zip(files, encoded):
        key = bare_filename(f.name)
        if key in table:
            logger.debug("Asset %s overrides an earlier file with the same name", f.name)
        table[key] = data
    return table


async def _load_all(loader, files: List[InputFile]) -> List[str]:
    return list(await asyncio.gather(*(asyncio.to_thread(loader, f) for f in files)))


async def load_content(classified: ClassifiedSet) -> LoadedContent:
    """Load every classified file concurrently.

    Raises:
        ReadFailure: if any single read fails; no partial content is returned.
    """
    binaries = classified.images + classified.videos
    markup, stylesheets, scripts, encoded = await asyncio.gather(
        _load_all(load_text, classified.markup),
        _load_all(load_text, classified.stylesheets),
        _load_all(load_text, classified.scripts),
        _load_all(load_encoded, binaries),
    )
    assets = build_asset_table(binaries, encoded)
    logger.info(
        "Loaded %d markup, %d stylesheet, %d script files and %d assets",
        len(markup), len(stylesheets), len(scripts), len(assets),
    )
    return LoadedContent(
        markup=markup,
        stylesheets=stylesheets,
        scripts=scripts,
        assets=assets,
        file_count=classified.file_count,
    )
