"""Filesystem helpers that turn OS failures into cleaner errors."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from pathlib import Path

from .errors import DeletionError, TraversalError

logger = logging.getLogger(__name__)


def is_displayable_name(name: str) -> bool:
    # undecodable bytes surface as lone surrogates under surrogateescape
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return bool(name)


def stat_or_none(path: Path) -> os.stat_result | None:
    """Return ``path.stat()``, or ``None`` when nothing exists at ``path``."""
    try:
        return path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        raise TraversalError(
            f"Failed to get metadata for: {path} ({exc.strerror or exc})",
            path=path,
            operation="stat",
        ) from exc


def is_directory(path: Path) -> bool:
    info = stat_or_none(path)
    return info is not None and stat.S_ISDIR(info.st_mode)


def list_subdirectories(path: Path, *, what: str = "directory") -> list[Path]:
    """Return the immediate child directories of ``path``.

    Regular files, dangling links and entries whose name cannot be shown as
    text are skipped. Listing or stat failures raise :class:`TraversalError`.
    """
    try:
        entries = list(path.iterdir())
    except OSError as exc:
        raise TraversalError(
            f"Failed to read {what}: {path} ({exc.strerror or exc})",
            path=path,
            operation="read_dir",
        ) from exc
    out: list[Path] = []
    for entry in entries:
        if not is_displayable_name(entry.name):
            logger.debug("skipping undecodable entry under %s", path)
            continue
        if not is_directory(entry):
            continue
        out.append(entry)
    return out


def modified_ns(path: Path) -> int:
    try:
        return path.stat().st_mtime_ns
    except OSError as exc:
        raise TraversalError(
            f"Failed to get metadata for: {path} ({exc.strerror or exc})",
            path=path,
            operation="stat",
        ) from exc


def remove_tree(path: Path, *, what: str = "directory") -> None:
    try:
        if path.is_symlink():
            path.unlink()
        else:
            shutil.rmtree(path)
    except OSError as exc:
        raise DeletionError(
            f"Failed to delete {what}: {path} ({exc.strerror or exc})",
            path=path,
            operation="remove",
        ) from exc
    logger.debug("removed %s", path)
