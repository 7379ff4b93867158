"""Prune the checkpoints directory of task folders older than a threshold."""

from __future__ import annotations

import logging
import time
from datetime import timedelta
from pathlib import Path
from typing import Callable

from .fs import is_directory, list_subdirectories, modified_ns, remove_tree, stat_or_none
from .types import CheckpointPruneConfig, CheckpointPruneSummary, TaskFolder

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def _timedelta_ns(value: timedelta) -> int:
    return (value // timedelta(microseconds=1)) * 1000


def task_age_ns(task: TaskFolder, now_ns: int) -> int:
    # a modification time in the future counts as age zero
    return max(now_ns - task.modified_ns, 0)


def is_expired(task: TaskFolder, max_age: timedelta, now_ns: int) -> bool:
    return task_age_ns(task, now_ns) > _timedelta_ns(max_age)


def describe_age(max_age: timedelta) -> str:
    days = max_age / timedelta(days=1)
    return f"{days:g} days"


def prune_checkpoints(
    config: CheckpointPruneConfig,
    echo: Echo = print,
    now_ns: int | None = None,
) -> CheckpointPruneSummary:
    now = time.time_ns() if now_ns is None else now_ns
    age_label = describe_age(config.max_age)
    tasks_checked = 0
    removed: list[Path] = []
    missing: list[Path] = []

    echo(f"\nCleaning Roo checkpoints older than approximately {age_label}...")

    for base_dir in config.base_dirs:
        if stat_or_none(base_dir) is None:
            if config.verbose:
                echo(f"  Skipping {base_dir} (path not found)")
            missing.append(base_dir)
            continue

        for task_path in list_subdirectories(base_dir, what="Roo tasks directory"):
            tasks_checked += 1
            task = TaskFolder(path=task_path, modified_ns=modified_ns(task_path))
            if not is_expired(task, config.max_age, now):
                if config.verbose:
                    echo(f"  Keeping checkpoints for {task.path} (age < {age_label})")
                continue

            checkpoints_path = task.path / config.checkpoints_dirname
            if not is_directory(checkpoints_path):
                logger.debug("task %s has no %s directory", task.path, config.checkpoints_dirname)
                continue

            if config.dry_run:
                echo(f"  Would delete checkpoints: {checkpoints_path}")
            else:
                echo(f"  Deleting checkpoints: {checkpoints_path}")
                remove_tree(checkpoints_path, what="checkpoints directory")
            removed.append(checkpoints_path)

    echo("Roo checkpoints summary:")
    echo(f"  Task folders inspected: {tasks_checked}")
    if config.dry_run:
        echo(f"  Checkpoints eligible for deletion: {len(removed)}")
    else:
        echo(f"  Checkpoints deleted: {len(removed)}")

    return CheckpointPruneSummary(
        tasks_inspected=tasks_checked,
        checkpoints=len(removed),
        dry_run=config.dry_run,
        removed=tuple(removed),
        missing_base_dirs=tuple(missing),
    )
