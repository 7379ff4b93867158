from __future__ import annotations

import json
import logging
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

import typer

from pkgcache_core import (
    DEFAULT_KEEP,
    ROO_TASK_PATHS,
    CacheCleanConfig,
    CacheCleanSummary,
    CheckpointPruneConfig,
    CheckpointPruneSummary,
    PkgCacheError,
    __version__,
    clean_package_cache,
    prune_checkpoints,
)
from pkgcache_core.fs import is_directory

PROG_NAME = "cleanpkgcache"
DEFAULT_CACHE_PATH = r"C:\PkgCache\VC17LTCG"
MAX_AGE_DAYS_LIMIT = 36_500.0

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Clean package cache by keeping only the latest versions of each package",
    add_completion=False,
)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


def _silent(_: str) -> None:
    return None


def _cache_payload(summary: CacheCleanSummary | None) -> dict[str, Any] | None:
    if summary is None:
        return None
    return {
        "packages": summary.packages,
        "kept": summary.kept,
        "deleted": summary.deleted,
        "removed": [str(path) for path in summary.removed],
    }


def _checkpoint_payload(summary: CheckpointPruneSummary | None) -> dict[str, Any] | None:
    if summary is None:
        return None
    return {
        "tasks_inspected": summary.tasks_inspected,
        "checkpoints": summary.checkpoints,
        "removed": [str(path) for path in summary.removed],
        "missing_base_dirs": [str(path) for path in summary.missing_base_dirs],
    }


@app.command()
def clean(
    path: Path = typer.Argument(DEFAULT_CACHE_PATH, help="Path to the package cache directory"),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-d", help="Dry run - show what would be deleted without actually deleting"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    clean_roo_checkpoints: bool = typer.Option(
        False, "--clean-roo-checkpoints", help="Also clean Roo checkpoints older than the age threshold"
    ),
    keep: int = typer.Option(DEFAULT_KEEP, "--keep", min=0, help="Number of newest versions kept per package"),
    max_age_days: float = typer.Option(
        60.0,
        "--max-age-days",
        min=0.0,
        max=MAX_AGE_DAYS_LIMIT,
        help="Age in days after which task checkpoints are removed",
    ),
    roo_tasks_dirs: Optional[List[Path]] = typer.Option(
        None, "--roo-tasks-dir", help="Roo tasks directory to inspect (repeatable, replaces the defaults)"
    ),
    output_format: OutputFormat = typer.Option(OutputFormat.text, "--format", help="Report format"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """
    Keep the newest versions of every package in PATH and delete the rest.

    With --clean-roo-checkpoints the checkpoints of old Roo tasks are pruned
    too; PATH may then be missing, in which case only the pruning runs.
    """
    _configure_logging(verbose)
    as_json = output_format is OutputFormat.json
    echo = _silent if as_json else typer.echo

    cache_summary: CacheCleanSummary | None = None
    checkpoint_summary: CheckpointPruneSummary | None = None
    try:
        if dry_run:
            echo("DRY RUN MODE - No files will be deleted")

        if is_directory(path) or not clean_roo_checkpoints:
            echo(f"Cleaning package cache at: {path}")
            cache_summary = clean_package_cache(
                CacheCleanConfig(root=path, dry_run=dry_run, verbose=verbose, keep=keep),
                echo=echo,
            )
        else:
            logger.info("package cache %s not found; only pruning checkpoints", path)

        if clean_roo_checkpoints:
            checkpoint_summary = prune_checkpoints(
                CheckpointPruneConfig(
                    base_dirs=tuple(roo_tasks_dirs) if roo_tasks_dirs else ROO_TASK_PATHS,
                    dry_run=dry_run,
                    verbose=verbose,
                    max_age=timedelta(days=max_age_days),
                ),
                echo=echo,
            )
    except PkgCacheError as exc:
        logger.debug("aborting run", exc_info=True)
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        payload = {
            "ok": True,
            "dry_run": dry_run,
            "package_cache": _cache_payload(cache_summary),
            "roo_checkpoints": _checkpoint_payload(checkpoint_summary),
        }
        typer.echo(json.dumps(payload, indent=2))


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status instead of exiting."""
    try:
        app(args=argv, prog_name=PROG_NAME)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
