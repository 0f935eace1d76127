"""Entry resolution, retention and removal.

This module turns profile entries into concrete paths, applies
retention rules to pattern matches, and removes the resulting paths
while accounting for reclaimed space.
"""

from cleanctl.cleanup.expansion import canonicalize, expand_entry
from cleanctl.cleanup.patterns import EntryError, InvalidPatternError, validate_pattern
from cleanctl.cleanup.protected import (
    PROTECTED_PATH_PATTERNS,
    contains_protected_path,
    is_protected_path,
)
from cleanctl.cleanup.remover import (
    InspectFailedError,
    ReadDirectoryFailedError,
    RemoveDirectoryFailedError,
    RemoveError,
    RemoveFileFailedError,
    RemoveLinkFailedError,
    remove_path,
)
from cleanctl.cleanup.retention import apply_exception, apply_retention
from cleanctl.cleanup.runner import CleanMode, CleanReport, ProfileCleaner

__all__ = [
    "PROTECTED_PATH_PATTERNS",
    "CleanMode",
    "CleanReport",
    "EntryError",
    "InspectFailedError",
    "InvalidPatternError",
    "ProfileCleaner",
    "ReadDirectoryFailedError",
    "RemoveDirectoryFailedError",
    "RemoveError",
    "RemoveFileFailedError",
    "RemoveLinkFailedError",
    "apply_exception",
    "apply_retention",
    "canonicalize",
    "contains_protected_path",
    "expand_entry",
    "is_protected_path",
    "remove_path",
    "validate_pattern",
]
