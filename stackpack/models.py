"""Data types shared by the bundling phases."""

from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class OutputKind(str, Enum):
    STANDALONE = "standalone-document"
    COMPONENT = "isolated-component"


@dataclass(frozen=True)
class InputFile:
    """A named byte blob handed to the bundler.

    ``name`` may carry directory segments (``css/site.css``); only the
    extension and the last segment matter to the bundler. Bytes are fetched
    through ``opener`` so that path-backed files are read during the load
    phase, where failures become ``ReadFailure``.
    """

    name: str
    size: int
    opener: Callable[[], bytes] = field(repr=False, compare=False)

    def read_bytes(self) -> bytes:
        return self.opener()

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "InputFile":
        return cls(name=name, size=len(data), opener=lambda: data)

    @classmethod
    def from_path(cls, path: str | pathlib.Path, name: str | None = None) -> "InputFile":
        p = pathlib.Path(path)
        try:
            size = p.stat().st_size
        except OSError:
            size = 0
        return cls(name=name or p.name, size=size, opener=p.read_bytes)


@dataclass(frozen=True)
class BundleResult:
    content: str
    filename: str
    output_kind: OutputKind = OutputKind.STANDALONE
    file_count: int = 0
