"""Error taxonomy for bundling runs and exit code mapping for the CLI."""

from __future__ import annotations


class StackPackError(Exception):
    """Base error for deterministic CLI exit codes."""

    exit_code: int = 1


class UnsupportedFileType(StackPackError):
    """Diagnostic for a file whose extension maps to no category.

    Never raised by the bundler: instances are logged and handed to the
    classifier's ``on_unsupported`` callback, and bundling carries on.
    """

    exit_code = 2

    def __init__(self, name: str):
        super().__init__(f"Unsupported file type: {name}")
        self.name = name


class ReadFailure(StackPackError):
    """A file's bytes could not be read; fails the whole run."""

    exit_code = 3

    def __init__(self, name: str, reason: str = ""):
        message = f"Failed to read {name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.name = name


class MissingRequiredCategory(StackPackError):
    """Caller-side policy: a required category has no files."""

    exit_code = 2


class InvalidComponentName(StackPackError):
    """Component name is not usable as a JavaScript class name."""

    exit_code = 2


class InvalidOutputKind(StackPackError):
    """Unknown output kind requested."""

    exit_code = 2


class InvalidSettings(StackPackError):
    """Settings file or environment value cannot be used."""

    exit_code = 2


def exit_code_for_exception(exc: BaseException) -> int:
    """Resolve a deterministic exit code for an exception."""
    if isinstance(exc, StackPackError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return ReadFailure.exit_code
    return 1
