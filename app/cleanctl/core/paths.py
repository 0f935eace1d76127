"""XDG-compliant path management for cleanctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage, and resolves the profile
argument given on the command line.

XDG defaults:
- Config: ~/.config/cleanctl/
- Profiles: ~/.config/cleanctl/profiles/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "cleanctl"

# Suffixes tried, in order, when a profile is given by name
PROFILE_SUFFIXES: tuple[str, ...] = (".json", ".toml")


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/cleanctl/ (or XDG_CONFIG_HOME/cleanctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_profiles_dir() -> Path:
    """Get the directory holding named profiles.

    Returns:
        Path to ~/.config/cleanctl/profiles/.
    """
    return get_config_dir() / "profiles"


def resolve_profile_path(value: str | Path) -> Path:
    """Resolve a --profile argument to a profile file path.

    An argument naming an existing file is returned as-is. A bare name
    (no path separator) that does not exist in the working directory is
    looked up in the profiles directory, trying each known suffix in
    order. When nothing is found the original argument is returned so
    that loading reports it as missing.

    Args:
        value: Path or bare profile name from the command line.

    Returns:
        Path to the profile file.
    """
    path = Path(value)
    if path.exists() or os.sep in str(value) or "/" in str(value):
        return path

    profiles_dir = get_profiles_dir()
    if path.suffix in PROFILE_SUFFIXES:
        candidate = profiles_dir / path.name
        return candidate if candidate.exists() else path

    for suffix in PROFILE_SUFFIXES:
        candidate = profiles_dir / f"{path.name}{suffix}"
        if candidate.exists():
            return candidate

    return path
