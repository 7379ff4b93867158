"""Core library for cleanpkgcache."""

from .cache import clean_package_cache, scan_packages, validate_cache_root
from .checkpoints import is_expired, prune_checkpoints, task_age_ns
from .errors import DeletionError, InvalidCachePathError, PkgCacheError, TraversalError
from .retention import plan_retention, rank_versions
from .types import (
    CHECKPOINTS_DIRNAME,
    DEFAULT_KEEP,
    DEFAULT_MAX_AGE,
    ROO_TASK_PATHS,
    CacheCleanConfig,
    CacheCleanSummary,
    CheckpointPruneConfig,
    CheckpointPruneSummary,
    Package,
    PackageVersion,
    RetentionPlan,
    TaskFolder,
)

__version__ = "0.2.1"

__all__ = [
    "__version__",
    "clean_package_cache",
    "scan_packages",
    "validate_cache_root",
    "prune_checkpoints",
    "is_expired",
    "task_age_ns",
    "plan_retention",
    "rank_versions",
    "PkgCacheError",
    "InvalidCachePathError",
    "TraversalError",
    "DeletionError",
    "CHECKPOINTS_DIRNAME",
    "DEFAULT_KEEP",
    "DEFAULT_MAX_AGE",
    "ROO_TASK_PATHS",
    "CacheCleanConfig",
    "CacheCleanSummary",
    "CheckpointPruneConfig",
    "CheckpointPruneSummary",
    "Package",
    "PackageVersion",
    "RetentionPlan",
    "TaskFolder",
]
