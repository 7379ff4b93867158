"""Version retention policy: rank by modification time, keep the newest K."""

from __future__ import annotations

from typing import Iterable

from .types import Package, PackageVersion, RetentionPlan


def rank_versions(versions: Iterable[PackageVersion]) -> list[PackageVersion]:
    """Newest first; equal timestamps fall back to name order."""
    by_name = sorted(versions, key=lambda item: item.name)
    return sorted(by_name, key=lambda item: item.modified_ns, reverse=True)


def plan_retention(package: Package, keep: int) -> RetentionPlan:
    if keep < 0:
        raise ValueError(f"keep must be >= 0, got {keep}")
    ranked = rank_versions(package.versions)
    return RetentionPlan(package=package, keep=tuple(ranked[:keep]), delete=tuple(ranked[keep:]))
