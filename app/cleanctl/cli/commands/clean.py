"""Clean command implementation.

Loads a profile, resolves its entries to paths and removes them.
"""

from typing import Annotated

import typer
from rich.markup import escape

from cleanctl.cleanup.runner import CleanMode, ProfileCleaner
from cleanctl.cli.display import print_clean_summary, print_progress
from cleanctl.cli.prompt import confirm
from cleanctl.core.paths import resolve_profile_path
from cleanctl.profile.loader import require_profile
from cleanctl.utils.formatting import console, print_info

app = typer.Typer(
    help="Remove the paths described by a profile.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def clean_profile(
    ctx: typer.Context,
    profile: Annotated[
        str,
        typer.Option(
            "--profile",
            "-p",
            help="Profile file, or the name of a profile in the config directory.",
        ),
    ],
    mode: Annotated[
        CleanMode,
        typer.Option(
            "--mode",
            "-m",
            help="Confirmation mode: silent, everyEntry or everyPath.",
            case_sensitive=False,
        ),
    ] = CleanMode.EVERY_PATH,
) -> None:
    """Clean the entries described by a profile.

    By default every resolved path is confirmed before it is removed.

    Examples:
        cleanctl clean -p caches.json                 # Confirm each path
        cleanctl clean -p caches --mode everyEntry    # Confirm each entry
        cleanctl clean -p caches.toml --mode silent   # No prompts
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    print_info(f"Loading profile from {escape(str(resolve_profile_path(profile)))}...")
    loaded = require_profile(profile)

    console.print(f"Discovering paths using profile '[bold]{escape(loaded.name)}[/bold]'...")

    cleaner = ProfileCleaner(
        mode=mode,
        confirm=confirm,
        on_progress=None if quiet else print_progress,
    )
    report = cleaner.run(loaded)

    print_clean_summary(report)

    if not report.succeeded:
        raise typer.Exit(code=1)
