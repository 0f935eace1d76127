"""Retention resolution for pattern matches.

Given the full match set of one pattern and a retention rule, decides
which matches are kept and returns the rest for deletion. Metadata that
cannot be read never aborts resolution: the affected path ranks lowest
and stays eligible for deletion.
"""

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from cleanctl.profile.models import PatternException, Retention, RetentionOrder

logger = logging.getLogger(__name__)

# (available, value): unavailable metadata compares lower than any real timestamp
TimeKey = tuple[bool, float]

_UNAVAILABLE: TimeKey = (False, 0.0)


def _created_time(st: os.stat_result) -> float:
    """Return the creation time from a stat result.

    Uses ``st_birthtime`` where the platform reports it and falls back
    to ``st_ctime`` (inode change time) elsewhere.
    """
    birthtime: float | None = getattr(st, "st_birthtime", None)
    return birthtime if birthtime is not None else st.st_ctime


def _time_key(path: Path, read: Callable[[os.stat_result], float]) -> TimeKey:
    try:
        return (True, read(path.stat()))
    except OSError as e:
        logger.debug("Cannot read metadata of %s, ranking it lowest: %s", path, e)
        return _UNAVAILABLE


def modified_key(path: Path) -> TimeKey:
    """Rank a path by modification time."""
    return _time_key(path, lambda st: st.st_mtime)


def created_key(path: Path) -> TimeKey:
    """Rank a path by creation time."""
    return _time_key(path, _created_time)


def name_key(path: Path) -> str:
    """Rank a path by its final component."""
    return path.name


def apply_retention(paths: Sequence[Path], retention: Retention) -> list[Path]:
    """Apply a count-based retention rule to a pattern's matches.

    Matches are sorted descending by the rule's key (newest first, or
    reverse-lexicographic by name); the sort is stable, so ties keep
    their enumeration order. The first ``count`` are retained and the
    remainder returned.

    Args:
        paths: Every match of a single pattern, in enumeration order.
        retention: The retention rule.

    Returns:
        Paths to delete; empty when ``count`` covers every match.
    """
    match retention.order:
        case RetentionOrder.FILE_NAME:
            ranked = sorted(paths, key=name_key, reverse=True)
        case RetentionOrder.CREATED:
            ranked = sorted(paths, key=created_key, reverse=True)
        case RetentionOrder.MODIFIED:
            ranked = sorted(paths, key=modified_key, reverse=True)

    for kept in ranked[: retention.count]:
        logger.debug("Retaining %s (%s)", kept, retention)

    return ranked[retention.count :]


def find_exception(paths: Sequence[Path], exception: PatternException) -> Path | None:
    """Determine the single match excluded by a legacy exception rule.

    The minimum is the first of equal candidates and the maximum is the
    last of equal candidates.

    Args:
        paths: Every match of a single pattern, in enumeration order.
        exception: The exception rule.

    Returns:
        The path to keep, or None when there are no matches.
    """
    if not paths:
        return None

    match exception:
        case PatternException.FIRST_ASCENDING:
            return min(paths, key=name_key)
        case PatternException.FIRST_DESCENDING:
            return max(reversed(paths), key=name_key)
        case PatternException.MOST_RECENT:
            return max(reversed(paths), key=modified_key)


def apply_exception(paths: Sequence[Path], exception: PatternException) -> list[Path]:
    """Apply a legacy single-exclusion rule to a pattern's matches.

    Args:
        paths: Every match of a single pattern, in enumeration order.
        exception: The exception rule.

    Returns:
        Every match except the excluded one; empty when no exclusion
        target exists, never the full match set.
    """
    excluded = find_exception(paths, exception)
    if excluded is None:
        return []

    logger.debug("Retaining %s (%s)", excluded, exception)
    return [p for p in paths if p != excluded]
