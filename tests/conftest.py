"""Shared fixtures for stackpack tests."""

from __future__ import annotations

from typing import Callable

import pytest

from stackpack.models import InputFile


@pytest.fixture
def make_file() -> Callable[..., InputFile]:
    """Build an in-memory input file from text or bytes."""

    def _make(name: str, content: str | bytes = "") -> InputFile:
        data = content.encode("utf-8") if isinstance(content, str) else content
        return InputFile.from_bytes(name, data)

    return _make


@pytest.fixture
def failing_file() -> InputFile:
    def _boom() -> bytes:
        raise PermissionError("permission denied")

    return InputFile(name="locked.css", size=0, opener=_boom)
