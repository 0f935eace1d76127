"""Profile management commands.

Provides commands to validate, list and scaffold cleanup profiles.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from cleanctl.cli.display import create_entries_table
from cleanctl.core.paths import PROFILE_SUFFIXES, get_profiles_dir
from cleanctl.profile.loader import ProfileError, require_profile, save_profile
from cleanctl.profile.models import (
    PathEntry,
    PatternEntry,
    PatternException,
    Profile,
    Retention,
    RetentionOrder,
)
from cleanctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Validate, list and create cleanup profiles.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def validate(
    profile: Annotated[
        str,
        typer.Argument(help="Profile file, or the name of a profile in the config directory."),
    ],
) -> None:
    """Load a profile and show its entries."""
    loaded = require_profile(profile)

    console.print(create_entries_table(loaded))
    print_success(f"Profile '{escape(loaded.name)}' is valid ({len(loaded.entries)} entries).")


@app.command("list")
def list_profiles() -> None:
    """List named profiles in the config directory."""
    profiles_dir = get_profiles_dir()
    if not profiles_dir.is_dir():
        print_info(f"No profiles directory at {profiles_dir}.")
        return

    found = sorted(p for p in profiles_dir.iterdir() if p.suffix in PROFILE_SUFFIXES)
    if not found:
        print_info(f"No profiles found in {profiles_dir}.")
        return

    for path in found:
        console.print(f"[path]{escape(path.stem)}[/path] [muted]{escape(str(path))}[/muted]")


@app.command()
def init(
    path: Annotated[
        Path,
        typer.Argument(help="Where to write the profile (.json or .toml)."),
    ],
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Profile display name."),
    ] = "example",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file."),
    ] = False,
) -> None:
    """Write a starter profile showing every entry kind."""
    if path.exists() and not force:
        print_error(f"File already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_profile(create_starter_profile(name), path)
    except ProfileError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Profile written to {escape(str(saved))}")


def create_starter_profile(name: str) -> Profile:
    """Build an example profile covering paths, patterns and retention.

    Args:
        name: Profile display name.

    Returns:
        Profile with one entry of each kind.
    """
    return Profile(
        name=name,
        entries=(
            PathEntry(path="build"),
            PatternEntry(pattern="**/__pycache__"),
            PatternEntry(
                pattern="logs/*.log",
                retention=Retention(order=RetentionOrder.MODIFIED, count=3),
            ),
            PatternEntry(
                pattern="backups/*.tar.gz",
                exception=PatternException.MOST_RECENT,
            ),
        ),
    )
