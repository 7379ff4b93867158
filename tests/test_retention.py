from __future__ import annotations

from pathlib import Path

import pytest

from pkgcache_core import Package, PackageVersion, plan_retention, rank_versions


def _package(*versions: tuple[str, int]) -> Package:
    root = Path("/cache/demo")
    return Package(
        name="demo",
        path=root,
        versions=tuple(PackageVersion(name=name, path=root / name, modified_ns=ts) for name, ts in versions),
    )


@pytest.mark.parametrize(
    ("count", "kept", "deleted"),
    [(0, 0, 0), (1, 1, 0), (2, 2, 0), (5, 2, 3)],
)
def test_plan_keeps_newest_two(count: int, kept: int, deleted: int) -> None:
    package = _package(*[(f"1.{idx}", 100 * (idx + 1)) for idx in range(count)])

    plan = plan_retention(package, keep=2)

    assert len(plan.keep) == kept
    assert len(plan.delete) == deleted
    assert set(plan.keep).isdisjoint(plan.delete)
    assert set(plan.keep) | set(plan.delete) == set(package.versions)


def test_plan_keeps_versions_with_largest_timestamps() -> None:
    package = _package(("1.1", 200), ("1.0", 100), ("1.3", 50), ("1.2", 300))

    plan = plan_retention(package, keep=2)

    assert [item.name for item in plan.keep] == ["1.2", "1.1"]
    assert [item.name for item in plan.delete] == ["1.0", "1.3"]


def test_rank_breaks_timestamp_ties_by_name() -> None:
    package = _package(("b", 100), ("c", 100), ("a", 100), ("z", 50))

    ranked = rank_versions(package.versions)

    assert [item.name for item in ranked] == ["a", "b", "c", "z"]


def test_plan_with_zero_keep_deletes_everything() -> None:
    plan = plan_retention(_package(("1.0", 1), ("1.1", 2)), keep=0)

    assert plan.keep == ()
    assert [item.name for item in plan.delete] == ["1.1", "1.0"]


def test_plan_rejects_negative_keep() -> None:
    with pytest.raises(ValueError):
        plan_retention(_package(("1.0", 1)), keep=-1)
