"""Cache cleaner datatypes and configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path

DEFAULT_KEEP = 2
DEFAULT_MAX_AGE = timedelta(days=60)
CHECKPOINTS_DIRNAME = "checkpoints"

ROO_TASK_PATHS: tuple[Path, ...] = (
    Path(r"C:\Users\zhizha\AppData\Roaming\Code\User\globalStorage\microsoftai.ms-roo-cline\tasks"),
    Path(r"C:\Users\zhizha\AppData\Roaming\Code\User\globalStorage\rooveterinaryinc.roo-cline\tasks"),
)


def _to_datetime(timestamp_ns: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ns / 1_000_000_000)


@dataclass(frozen=True)
class PackageVersion:
    name: str
    path: Path
    modified_ns: int

    @property
    def modified(self) -> datetime:
        return _to_datetime(self.modified_ns)


@dataclass(frozen=True)
class Package:
    name: str
    path: Path
    versions: tuple[PackageVersion, ...] = ()


@dataclass(frozen=True)
class RetentionPlan:
    package: Package
    keep: tuple[PackageVersion, ...]
    delete: tuple[PackageVersion, ...]

    @property
    def ranked(self) -> tuple[PackageVersion, ...]:
        return self.keep + self.delete


@dataclass(frozen=True)
class TaskFolder:
    path: Path
    modified_ns: int

    @property
    def modified(self) -> datetime:
        return _to_datetime(self.modified_ns)


@dataclass(frozen=True)
class CacheCleanConfig:
    root: Path
    dry_run: bool = False
    verbose: bool = False
    keep: int = DEFAULT_KEEP


@dataclass(frozen=True)
class CheckpointPruneConfig:
    base_dirs: tuple[Path, ...] = ROO_TASK_PATHS
    dry_run: bool = False
    verbose: bool = False
    max_age: timedelta = DEFAULT_MAX_AGE
    checkpoints_dirname: str = CHECKPOINTS_DIRNAME


@dataclass(frozen=True)
class CacheCleanSummary:
    packages: int
    kept: int
    deleted: int
    dry_run: bool
    removed: tuple[Path, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CheckpointPruneSummary:
    tasks_inspected: int
    checkpoints: int
    dry_run: bool
    removed: tuple[Path, ...] = field(default_factory=tuple)
    missing_base_dirs: tuple[Path, ...] = field(default_factory=tuple)
