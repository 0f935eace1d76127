"""Cleanup profile models and loading.

A profile is a named, ordered list of entries describing what to
remove: literal paths, or glob patterns with optional retention.
"""

from cleanctl.profile.loader import (
    ProfileError,
    ProfileNotFoundError,
    ProfileParseError,
    ProfileValidationError,
    load_profile,
    save_profile,
)
from cleanctl.profile.models import (
    Entry,
    PathEntry,
    PatternEntry,
    PatternException,
    Profile,
    Retention,
    RetentionOrder,
)

__all__ = [
    "Entry",
    "PathEntry",
    "PatternEntry",
    "PatternException",
    "Profile",
    "ProfileError",
    "ProfileNotFoundError",
    "ProfileParseError",
    "ProfileValidationError",
    "Retention",
    "RetentionOrder",
    "load_profile",
    "save_profile",
]
