"""Sort input files into categories by extension."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from .errors import MissingRequiredCategory, UnsupportedFileType
from .models import InputFile

logger = logging.getLogger(__name__)


class Category(str, Enum):
    MARKUP = "markup"
    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    IMAGE = "image"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"


EXTENSION_CATEGORIES: Dict[str, Category] = {
    "html": Category.MARKUP,
    "htm": Category.MARKUP,
    "css": Category.STYLESHEET,
    "js": Category.SCRIPT,
    "jsx": Category.SCRIPT,
    "ts": Category.SCRIPT,
    "tsx": Category.SCRIPT,
    "jpg": Category.IMAGE,
    "jpeg": Category.IMAGE,
    "png": Category.IMAGE,
    "gif": Category.IMAGE,
    "svg": Category.IMAGE,
    "webp": Category.IMAGE,
    "bmp": Category.IMAGE,
    "ico": Category.IMAGE,
    "mp4": Category.VIDEO,
    "webm": Category.VIDEO,
}

SUPPORTED_CATEGORIES = (
    Category.MARKUP,
    Category.STYLESHEET,
    Category.SCRIPT,
    Category.IMAGE,
    Category.VIDEO,
)


@dataclass
class ClassifiedSet:
    """Files grouped by category, each group in input order."""

    files: Dict[Category, List[InputFile]] = field(
        default_factory=lambda: {c: [] for c in SUPPORTED_CATEGORIES}
    )
    skipped: List[str] = field(default_factory=list)

    def __getitem__(self, category: Category) -> List[InputFile]:
        return self.files[category]

    @property
    def markup(self) -> List[InputFile]:
        return self.files[Category.MARKUP]

    @property
    def stylesheets(self) -> List[InputFile]:
        return self.files[Category.STYLESHEET]

    @property
    def scripts(self) -> List[InputFile]:
        return self.files[Category.SCRIPT]

    @property
    def images(self) -> List[InputFile]:
        return self.files[Category.IMAGE]

    @property
    def videos(self) -> List[InputFile]:
        return self.files[Category.VIDEO]

    @property
    def file_count(self) -> int:
        return sum(len(group) for group in self.files.values())

    def is_empty(self) -> bool:
        return self.file_count == 0

    def require(self, *categories: Category) -> None:
        """Enforce a caller policy on which categories must be present.

        With no arguments, at least one supported file of any kind is required.
        """
        if not categories:
            if self.is_empty():
                raise MissingRequiredCategory("No supported files to bundle")
            return
        missing = [c.value for c in categories if not self.files.get(c)]
        if missing:
            raise MissingRequiredCategory(f"Missing required file categories: {', '.join(missing)}")


def file_extension(name: str) -> str:
    """Lowercase text after the last dot, or '' when there is none."""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def category_for(name: str) -> Category:
    return EXTENSION_CATEGORIES.get(file_extension(name), Category.UNSUPPORTED)


def classify(
    files: Iterable[InputFile],
    on_unsupported: Optional[Callable[[UnsupportedFileType], None]] = None,
) -> ClassifiedSet:
    classified = ClassifiedSet()
    for f in files:
        category = category_for(f.name)
        if category is Category.UNSUPPORTED:
            diagnostic = UnsupportedFileType(f.name)
            logger.warning(str(diagnostic))
            classified.skipped.append(f.name)
            if on_unsupported is not None:
                on_unsupported(diagnostic)
            continue
        classified.files[category].append(f)
    logger.debug(
        "Classified %d files (%s), skipped %d",
        classified.file_count,
        ", ".join(f"{c.value}={len(classified[c])}" for c in SUPPORTED_CATEGORIES),
        len(classified.skipped),
    )
    return classified
