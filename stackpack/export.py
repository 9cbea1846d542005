"""Output filenames and writing finished artifacts."""

from __future__ import annotations

import logging
import pathlib

logger = logging.getLogger(__name__)


def resolve_filename(custom: str | None, default_stem: str, suffix: str) -> str:
    """Use a non-blank custom name verbatim, adding ``suffix`` if it is missing."""
    filename = custom if custom and custom.strip() != "" else default_stem
    return filename if filename.endswith(suffix) else f"{filename}{suffix}"


def bytes_human(n: int) -> str:
    """Human-readable bytes: 1 decimal for KiB and above, integer for B."""
    units = ["B", "KiB", "MiB", "GiB", "TiB"]
    f = float(n)
    i = 0
    while f >= 1024.0 and i < len(units) - 1:
        f /= 1024.0
        i += 1
    if i == 0:
        return f"{int(f)} {units[i]}"
    return f"{f:.1f} {units[i]}"


def export_artifact(content: str, filename: str, destination: str | pathlib.Path = ".") -> pathlib.Path:
    # last path segment only; the file stays inside destination
    out_path = pathlib.Path(destination) / pathlib.Path(filename).name
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s (%s)", out_path, bytes_human(out_path.stat().st_size))
    return out_path
