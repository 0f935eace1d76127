"""Entry expansion and path canonicalization.

Turns profile entries into the concrete, ordered list of paths they
describe, then canonicalizes those paths for removal.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import assert_never

from cleanctl.cleanup.patterns import EntryError, InvalidPatternError, match_pattern
from cleanctl.cleanup.retention import apply_exception, apply_retention
from cleanctl.profile.models import Entry, PathEntry, PatternEntry

logger = logging.getLogger(__name__)

__all__ = ["EntryError", "InvalidPatternError", "canonicalize", "expand_entry"]


def expand_entry(entry: Entry) -> list[Path]:
    """Expand an entry to the paths it represents.

    A path entry always expands to exactly its own path, whether or not
    it exists. A pattern entry expands to its current glob matches minus
    any matches kept by its retention or exception rule.

    Args:
        entry: The profile entry to expand.

    Returns:
        Paths to delete, in order.

    Raises:
        InvalidPatternError: If a pattern entry's glob is invalid.
    """
    match entry:
        case PathEntry(path=path):
            return [Path(path)]
        case PatternEntry(pattern=pattern, retention=retention, exception=exception):
            matches = match_pattern(pattern)
            if retention is not None:
                return apply_retention(matches, retention)
            if exception is not None:
                return apply_exception(matches, exception)
            return matches
        case _:
            assert_never(entry)


def canonicalize(paths: Iterable[Path]) -> list[Path]:
    """Resolve paths to absolute, symlink-free form.

    Paths that no longer exist (including broken symlinks) or that the
    OS cannot represent, such as names with a null byte, are dropped
    silently: a vanished path needs no removal.

    Args:
        paths: Expanded paths.

    Returns:
        Canonical paths of the entries that exist, in input order.
    """
    resolved: list[Path] = []
    for path in paths:
        try:
            resolved.append(path.resolve(strict=True))
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug("Dropping %s: %s", path, e)
    return resolved
