"""Exceptions raised by the cache cleaner and checkpoint pruner."""

from __future__ import annotations

from pathlib import Path


class PkgCacheError(RuntimeError):
    """Base error; every fatal condition aborts the run."""

    def __init__(self, message: str, *, path: Path | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation


class InvalidCachePathError(PkgCacheError):
    """Target path is missing or is not a directory."""


class TraversalError(PkgCacheError):
    """A directory listing or metadata read failed."""


class DeletionError(PkgCacheError):
    """Recursive removal of a directory tree failed."""
