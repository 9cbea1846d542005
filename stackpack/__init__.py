"""Bundle web assets into one standalone HTML page or one web component."""

from .bundler import bundle, bundle_sync
from .classifier import Category, ClassifiedSet, classify
from .models import BundleResult, InputFile, OutputKind

__version__ = "0.1.0"

__all__ = [
    "bundle",
    "bundle_sync",
    "classify",
    "Category",
    "ClassifiedSet",
    "BundleResult",
    "InputFile",
    "OutputKind",
]
