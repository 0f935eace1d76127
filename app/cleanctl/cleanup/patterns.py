"""Glob pattern validation and matching.

Patterns use shell glob syntax: ``*`` and ``?`` within a path
component, ``**`` across directories, and ``[...]`` character classes
(with ``[!...]`` negation). Leading dots are not special, so wildcards
match hidden entries.
"""

import glob
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_SEPARATORS = frozenset({"/", os.sep})


class EntryError(Exception):
    """Base exception for errors expanding a profile entry."""


class InvalidPatternError(EntryError):
    """Raised when a glob pattern is syntactically invalid.

    Attributes:
        pattern: The offending pattern text.
        position: Index of the character where the error was detected.
        reason: Short description of the problem.
    """

    def __init__(self, pattern: str, position: int, reason: str) -> None:
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"invalid glob pattern '{pattern}' at position {position}: {reason}")


def validate_pattern(pattern: str) -> None:
    """Check a glob pattern for syntax errors.

    Python's glob module treats malformed syntax literally instead of
    failing, so errors that would silently match nothing are caught here.

    Args:
        pattern: Glob pattern to check.

    Raises:
        InvalidPatternError: On a null byte, an unclosed character class,
            a run of three or more ``*``, or a ``**`` that is not a whole
            path component.
    """
    if "\0" in pattern:
        raise InvalidPatternError(
            pattern, pattern.index("\0"), "patterns cannot contain a null byte"
        )

    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]

        if char == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A leading "]" is a literal member of the class
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise InvalidPatternError(pattern, i, "unclosed character class")
            i = close + 1
            continue

        if char == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            run = j - i
            if run > 2:
                raise InvalidPatternError(
                    pattern, i, "wildcards are either regular `*` or recursive `**`"
                )
            if run == 2:
                starts_component = i == 0 or pattern[i - 1] in _SEPARATORS
                ends_component = j == n or pattern[j] in _SEPARATORS
                if not (starts_component and ends_component):
                    raise InvalidPatternError(
                        pattern, i, "recursive wildcards must form a single path component"
                    )
            i = j
            continue

        i += 1


def match_pattern(pattern: str) -> list[Path]:
    """Enumerate filesystem entries matching a glob pattern.

    Directories that cannot be read during enumeration are skipped by
    the glob machinery; whatever enumerated cleanly is returned.

    Args:
        pattern: Glob pattern, absolute or relative to the working directory.

    Returns:
        Matching paths in enumeration order (not sorted).

    Raises:
        InvalidPatternError: If the pattern is syntactically invalid.
    """
    validate_pattern(pattern)
    matches = [Path(p) for p in glob.iglob(pattern, recursive=True, include_hidden=True)]
    logger.debug("Pattern %s matched %d path(s)", pattern, len(matches))
    return matches
