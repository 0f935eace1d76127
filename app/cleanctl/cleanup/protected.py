"""Protected filesystem paths that should never be removed.

A profile typo such as a pattern of ``/*`` or a path of ``~`` could
otherwise wipe a system. Canonical paths matching any of these
patterns, and directories containing one, are refused before removal.
"""

import fnmatch
from pathlib import Path

# Protected path patterns (glob-style), matched against canonical paths.
# Patterns starting with ~ are expanded to the user's home directory
# before matching. Patterns starting with / are matched as-is.
PROTECTED_PATH_PATTERNS: list[str] = [
    # Filesystem root and home itself
    "/",
    "~",
    "/home",
    "/root",
    # SSH and security
    "~/.ssh",
    "~/.ssh/*",
    "~/.gnupg",
    "~/.gnupg/*",
    # cleanctl itself
    "~/.config/cleanctl",
    # Top-level system directories
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/lib",
    "/lib64",
    "/opt",
    "/proc",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
]


def _expanded_patterns() -> list[str]:
    home = str(Path.home())
    return [home + p[1:] if p.startswith("~") else p for p in PROTECTED_PATH_PATTERNS]


def is_protected_path(path: str) -> bool:
    """Check if a filesystem path is protected and must not be removed.

    The path argument should be a canonical absolute path. Patterns using
    ~ notation are expanded to the actual home directory before
    comparison using fnmatch for glob-style matching.

    Args:
        path: Canonical filesystem path to check.

    Returns:
        True if the path matches any protected pattern, False otherwise.
    """
    return any(fnmatch.fnmatch(path, expanded) for expanded in _expanded_patterns())


def contains_protected_path(path: str) -> bool:
    """Check if a protected path lies beneath a directory.

    Removing such a directory recursively would remove the protected
    path with it. A trailing ``/*`` component of a pattern is ignored,
    so the directory it protects is what is compared.

    Args:
        path: Canonical filesystem path to check.

    Returns:
        True if any protected path is a strict descendant of ``path``.
    """
    prefix = path.rstrip("/") + "/"
    for expanded in _expanded_patterns():
        base = expanded.removesuffix("/*")
        if base != path and base.startswith(prefix):
            return True
    return False
