"""Profile file I/O operations.

This module provides functions for loading and saving cleanup profiles
in JSON or TOML format with validation using Pydantic models.
"""

import json
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import ValidationError

from cleanctl.profile.models import Profile


class ProfileError(Exception):
    """Base exception for profile-related errors."""


class ProfileNotFoundError(ProfileError):
    """Raised when the profile file is not found."""


class ProfileParseError(ProfileError):
    """Raised when the profile file cannot be parsed."""


class ProfileValidationError(ProfileError):
    """Raised when the profile content is invalid."""


def _is_toml(path: Path) -> bool:
    return path.suffix.lower() == ".toml"


def load_profile(path: Path) -> Profile:
    """Load and validate a profile from a JSON or TOML file.

    The format is chosen by file suffix: ``.toml`` is read as TOML,
    anything else as JSON.

    Args:
        path: Path to the profile file.

    Returns:
        Validated Profile object.

    Raises:
        ProfileNotFoundError: If the profile file doesn't exist.
        ProfileParseError: If the JSON or TOML syntax is invalid.
        ProfileValidationError: If the content doesn't match the schema.
        ProfileError: If the file cannot be read.
    """
    if not path.exists():
        raise ProfileNotFoundError(f"Profile not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f) if _is_toml(path) else json.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ProfileParseError(f"Invalid TOML syntax: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ProfileParseError(f"Invalid JSON syntax: {e}") from e
    except OSError as e:
        raise ProfileError(f"Failed to read profile: {e}") from e

    try:
        return Profile.model_validate(data)
    except ValidationError as e:
        raise ProfileValidationError(f"Invalid profile content: {e}") from e


def save_profile(profile: Profile, path: Path) -> Path:
    """Save a profile to a JSON or TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.
    The temporary file is cleaned up on failure.

    Args:
        profile: The Profile object to save.
        path: Destination path; the suffix selects the format.

    Returns:
        Path where the profile was saved.

    Raises:
        ProfileError: If the file cannot be written.
    """
    data = _profile_to_dict(profile)

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(mode="wb", dir=path.parent, delete=False, suffix=".tmp") as f:
            tmp_path = Path(f.name)
            if _is_toml(path):
                tomli_w.dump(data, f)
            else:
                f.write(json.dumps(data, indent=2).encode("utf-8") + b"\n")
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ProfileError(f"Failed to write profile: {e}") from e

    return path


def _profile_to_dict(profile: Profile) -> dict[str, Any]:
    """Convert a Profile to a plain dictionary for serialization.

    Unset optional fields are omitted so the output stays valid TOML
    (which has no null) and mirrors hand-written profiles.
    """
    return profile.model_dump(mode="json", exclude_none=True)


def require_profile(value: str | Path) -> Profile:
    """Load a profile or exit with a helpful error message.

    This is a convenience wrapper around load_profile() that resolves
    profile names, prints user-friendly messages and exits on failure.

    Args:
        value: Profile path or name, as given on the command line.

    Returns:
        Loaded and validated Profile.

    Raises:
        typer.Exit: If the profile cannot be loaded.
    """
    import typer

    from cleanctl.core.paths import get_profiles_dir, resolve_profile_path
    from cleanctl.utils.formatting import print_error, print_info

    path = resolve_profile_path(value)
    try:
        return load_profile(path)
    except ProfileNotFoundError as e:
        print_error(f"Profile not found: {path}")
        print_info(f"Named profiles are looked up in {get_profiles_dir()}.")
        raise typer.Exit(code=1) from e
    except ProfileError as e:
        print_error(f"Failed to load profile: {e}")
        raise typer.Exit(code=1) from e
