"""Package cache cleaner: keep the newest versions of every package."""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Callable

from .errors import InvalidCachePathError
from .fs import list_subdirectories, modified_ns, remove_tree, stat_or_none
from .retention import plan_retention
from .types import CacheCleanConfig, CacheCleanSummary, Package, PackageVersion, RetentionPlan

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def format_timestamp(version: PackageVersion) -> str:
    return version.modified.isoformat(sep=" ", timespec="seconds")


def validate_cache_root(root: Path) -> None:
    info = stat_or_none(root)
    if info is None:
        raise InvalidCachePathError(f"Path does not exist: {root}", path=root, operation="validate")
    if not stat.S_ISDIR(info.st_mode):
        raise InvalidCachePathError(f"Path is not a directory: {root}", path=root, operation="validate")


def scan_packages(root: Path) -> list[Package]:
    """Collect packages and their versions under ``root``.

    Packages without any version directory are dropped. The result is
    ordered by package name.
    """
    packages: list[Package] = []
    for package_dir in list_subdirectories(root):
        versions = tuple(
            PackageVersion(name=version_dir.name, path=version_dir, modified_ns=modified_ns(version_dir))
            for version_dir in list_subdirectories(package_dir, what="package directory")
        )
        if not versions:
            logger.debug("package %s has no versions", package_dir.name)
            continue
        packages.append(Package(name=package_dir.name, path=package_dir, versions=versions))
    return sorted(packages, key=lambda item: item.name)


def _print_plan(plan: RetentionPlan, echo: Echo) -> None:
    echo(f"\nPackage: {plan.package.name}")
    echo(f"  Found {len(plan.package.versions)} versions:")
    for index, version in enumerate(plan.ranked, start=1):
        echo(f"    {index}: {version.name} (modified: {format_timestamp(version)})")


def clean_package_cache(config: CacheCleanConfig, echo: Echo = print) -> CacheCleanSummary:
    root = config.root
    validate_cache_root(root)
    plans = [plan_retention(package, config.keep) for package in scan_packages(root)]
    logger.debug("scanned %s packages under %s", len(plans), root)

    kept = 0
    removed: list[Path] = []
    for plan in plans:
        if config.verbose:
            _print_plan(plan, echo)
        for version in plan.keep:
            if config.verbose:
                echo(f"  Keeping: {version.name}")
            kept += 1
        for version in plan.delete:
            if config.dry_run:
                echo(f"  Would delete: {version.path}")
            else:
                echo(f"  Deleting: {version.path}")
                remove_tree(version.path)
            removed.append(version.path)

    echo("\nSummary:")
    echo(f"  Packages processed: {len(plans)}")
    echo(f"  Versions kept: {kept}")
    if config.dry_run:
        echo(f"  Versions that would be deleted: {len(removed)}")
    else:
        echo(f"  Versions deleted: {len(removed)}")

    return CacheCleanSummary(
        packages=len(plans),
        kept=kept,
        deleted=len(removed),
        dry_run=config.dry_run,
        removed=tuple(removed),
    )
