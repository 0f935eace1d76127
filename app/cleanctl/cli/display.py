"""Shared Rich display functions for profiles and cleanup results.

Provides table builders and summary printers used by the clean and
profile commands.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from cleanctl.cleanup.runner import CleanReport
from cleanctl.profile.models import PathEntry, PatternEntry, Profile
from cleanctl.utils.formatting import console, format_size, print_success, print_warning


def create_entries_table(profile: Profile) -> Table:
    """Create a Rich table describing a profile's entries.

    Args:
        profile: The profile to display.

    Returns:
        Rich Table with one row per entry, in profile order.
    """
    table = Table(
        title=f"Profile '{escape(profile.name)}'",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", width=4)
    table.add_column("Type", width=8)
    table.add_column("Target", no_wrap=True)
    table.add_column("Keeps")

    for index, entry in enumerate(profile.entries, start=1):
        match entry:
            case PathEntry(path=path):
                table.add_row(str(index), "path", f"[path]{escape(path)}[/path]", "[muted]-[/muted]")
            case PatternEntry(pattern=pattern, retention=retention, exception=exception):
                rule = retention or exception
                keeps = f"[retained]{rule}[/retained]" if rule is not None else "[muted]-[/muted]"
                table.add_row(str(index), "pattern", f"[path]{escape(pattern)}[/path]", keeps)

    return table


def create_errors_table(errors: list[str]) -> Table:
    """Create a Rich table listing per-entry and per-path failures.

    Args:
        errors: Error messages in the order they occurred.

    Returns:
        Rich Table configured for error display.
    """
    table = Table(
        title="Errors",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Message")

    for message in errors:
        table.add_row("[error]FAIL[/error]", f"[muted]{escape(message)}[/muted]")

    return table


def print_progress(index: int, total: int, path: Path) -> None:
    """Print a line announcing the removal of one path."""
    console.print(f"Deleting path {index + 1} of {total}: [path]{escape(str(path))}[/path]")


def print_clean_summary(report: CleanReport) -> None:
    """Print the outcome of a cleanup run.

    Shows an error table when anything failed, followed by counts,
    timings and the reclaimed size.

    Args:
        report: The finished run's report.
    """
    if report.errors:
        console.print(create_errors_table(report.errors))

    console.print(
        f"\n[muted]Expanded {report.expanded} path(s) in {report.expand_seconds:.3f}s, "
        f"processed in {report.remove_seconds:.3f}s[/muted]"
    )
    if report.skipped:
        console.print(f"[muted]Skipped {report.skipped} path(s) at the prompt[/muted]")

    reclaimed = f"[size]{format_size(report.reclaimed_bytes)}[/size]"
    if report.succeeded:
        print_success(f"Deleted {report.removed} path(s), reclaiming {reclaimed} of space.")
    else:
        print_warning(
            f"Deleted {report.removed} path(s), reclaiming {reclaimed} of space, "
            f"with {len(report.errors)} error(s)."
        )
