"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console

from cleanctl.core.theme import get_theme

# Decimal (SI) units, as used for disk sizes
_SIZE_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format a byte count as a human-readable string.

    Uses decimal units (1 kB = 1000 B).

    Args:
        size_bytes: Number of bytes, or None if unknown.

    Returns:
        String such as "0 B", "512 B" or "1.50 MB".
    """
    if not size_bytes:
        return "0 B"
    if abs(size_bytes) < 1000:
        return f"{size_bytes} B"
    size = float(size_bytes)
    for unit in _SIZE_UNITS[1:]:
        size /= 1000
        if abs(size) < 1000:
            return f"{size:.2f} {unit}"
    return f"{size:.2f} {_SIZE_UNITS[-1]}"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
