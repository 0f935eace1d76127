"""Profile models for declarative cleanup.

This module defines the Pydantic models representing a cleanup profile
document. Entries form a closed union discriminated by their ``type``
field: a literal ``path`` or a glob ``pattern``.
"""

from enum import Enum
from typing import Annotated, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RetentionOrder(str, Enum):
    """Sort key used to rank pattern matches for retention.

    Attributes:
        FILE_NAME: Final path component, compared as a string.
        CREATED: Creation (birth) time.
        MODIFIED: Last modification time.
    """

    FILE_NAME = "fileName"
    CREATED = "created"
    MODIFIED = "modified"


class PatternException(str, Enum):
    """Legacy single-match exclusion rule for pattern entries.

    Attributes:
        FIRST_ASCENDING: Keep the match whose file name sorts first.
        FIRST_DESCENDING: Keep the match whose file name sorts last.
        MOST_RECENT: Keep the most recently modified match.
    """

    FIRST_ASCENDING = "firstAscending"
    FIRST_DESCENDING = "firstDescending"
    MOST_RECENT = "mostRecent"

    def __str__(self) -> str:
        return {
            PatternException.FIRST_ASCENDING: "first-ascending",
            PatternException.FIRST_DESCENDING: "first-descending",
            PatternException.MOST_RECENT: "most-recent",
        }[self]


class Retention(BaseModel):
    """Count-based retention rule for a pattern entry.

    The ``count`` most favourably ranked matches (newest, or last by
    name) are kept; the rest are returned for deletion.

    Attributes:
        order: Sort key used to rank matches.
        count: Number of top-ranked matches to keep.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    order: Annotated[RetentionOrder, Field(description="Sort key for ranking matches")]
    count: Annotated[int, Field(ge=0, description="Number of matches to keep")]

    def __str__(self) -> str:
        return f"keep {self.count} by {self.order.value}"


class PathEntry(BaseModel):
    """A single file or directory path, used verbatim."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["path"] = "path"
    path: Annotated[str, Field(min_length=1, description="Full or relative path")]

    def __str__(self) -> str:
        return f"Path <{self.path}>"


class PatternEntry(BaseModel):
    """A glob pattern matching zero or more files or directories.

    At most one of ``retention`` and ``exception`` may be given.

    Attributes:
        pattern: Full or relative glob pattern.
        retention: Count-based retention rule, if any.
        exception: Legacy single-match exclusion rule, if any.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["pattern"] = "pattern"
    pattern: Annotated[str, Field(min_length=1, description="Glob pattern to match")]
    retention: Annotated[Retention | None, Field(description="Retention rule")] = None
    exception: Annotated[
        PatternException | None, Field(description="Legacy single exclusion")
    ] = None

    @model_validator(mode="after")
    def validate_single_rule(self) -> Self:
        """Validate that retention and exception are not combined."""
        if self.retention is not None and self.exception is not None:
            msg = f"Pattern '{self.pattern}' cannot have both 'retention' and 'exception'"
            raise ValueError(msg)
        return self

    def __str__(self) -> str:
        return f"Pattern <{self.pattern}>"


Entry = Annotated[PathEntry | PatternEntry, Field(discriminator="type")]


class Profile(BaseModel):
    """A named cleanup profile.

    Attributes:
        name: Display name, used for output only.
        entries: Entries in the order they are expanded and prompted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Profile display name")]
    entries: Annotated[
        tuple[Entry, ...],
        Field(default_factory=tuple, description="Entries to expand for removal"),
    ]
