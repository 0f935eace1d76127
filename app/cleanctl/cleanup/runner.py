"""Profile cleanup orchestration.

Expands every entry of a profile, canonicalizes the resulting paths and
removes them one at a time, accumulating totals and continuing past
individual failures. Runs are strictly sequential so that prompts are
presented one at a time and the reclaimed total needs no locking.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from cleanctl.cleanup.expansion import EntryError, canonicalize, expand_entry
from cleanctl.cleanup.protected import contains_protected_path, is_protected_path
from cleanctl.cleanup.remover import RemoveError, remove_path
from cleanctl.profile.models import Entry, Profile

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]
ProgressFn = Callable[[int, int, Path], None]


class CleanMode(str, Enum):
    """Confirmation mode for a cleanup run.

    Attributes:
        SILENT: Never prompt.
        EVERY_ENTRY: Prompt once per profile entry before expanding it.
        EVERY_PATH: Prompt once per resolved path before removing it.
    """

    SILENT = "silent"
    EVERY_ENTRY = "everyEntry"
    EVERY_PATH = "everyPath"


@dataclass(slots=True)
class CleanReport:
    """Outcome of a cleanup run.

    Attributes:
        expanded: Number of canonical paths produced by expansion.
        removed: Number of paths removed completely.
        reclaimed_bytes: Bytes freed, including partial directory removals.
        skipped: Number of paths declined at the prompt.
        errors: Human-readable messages for entry and path failures.
        protected: Paths refused because they are protected.
        expand_seconds: Time spent expanding entries.
        remove_seconds: Time spent removing paths.
    """

    expanded: int = 0
    removed: int = 0
    reclaimed_bytes: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)
    protected: list[Path] = field(default_factory=list)
    expand_seconds: float = 0.0
    remove_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        """Whether the run finished without any errors."""
        return not self.errors


class ProfileCleaner:
    """Runs a profile's entries through expansion and removal.

    Attributes:
        _mode: Confirmation mode.
        _confirm: Prompt capability; returns True to proceed.
        _on_progress: Called before each path removal in non-prompting
            modes with (index, total, path).
    """

    def __init__(
        self,
        mode: CleanMode = CleanMode.SILENT,
        confirm: ConfirmFn | None = None,
        on_progress: ProgressFn | None = None,
    ) -> None:
        """Initialize the ProfileCleaner.

        Args:
            mode: Confirmation mode.
            confirm: Prompt function, required unless mode is SILENT.
            on_progress: Optional progress callback.

        Raises:
            ValueError: If an interactive mode is requested without a
                prompt function.
        """
        if mode != CleanMode.SILENT and confirm is None:
            msg = f"Mode '{mode.value}' requires a confirm function"
            raise ValueError(msg)
        self._mode = mode
        self._confirm = confirm
        self._on_progress = on_progress

    def run(self, profile: Profile) -> CleanReport:
        """Clean every entry described by a profile.

        Args:
            profile: The loaded profile.

        Returns:
            CleanReport with totals and error messages.
        """
        report = CleanReport()

        entries = self._select_entries(profile)

        start = time.perf_counter()
        paths = self._resolve(entries, report)
        report.expanded = len(paths)
        report.expand_seconds = time.perf_counter() - start
        logger.info(
            "Expanded %d path(s) from profile '%s' in %.3fs",
            len(paths),
            profile.name,
            report.expand_seconds,
        )

        start = time.perf_counter()
        for index, path in enumerate(paths):
            self._clean_path(index, len(paths), path, report)
        report.remove_seconds = time.perf_counter() - start

        logger.info(
            "Removed %d path(s), reclaiming %d byte(s), with %d error(s)",
            report.removed,
            report.reclaimed_bytes,
            len(report.errors),
        )
        return report

    def _resolve(self, entries: list[Entry], report: CleanReport) -> list[Path]:
        """Expand and canonicalize entries into removal candidates.

        An entry that fails to expand is recorded in the report and does
        not affect the other entries. Paths resolved by several entries
        are kept once per entry.

        Args:
            entries: Entries to expand, in order.
            report: Report receiving entry errors.

        Returns:
            Canonical paths in entry order.
        """
        paths: list[Path] = []
        for entry in entries:
            try:
                expanded = expand_entry(entry)
            except EntryError as e:
                logger.warning("Failed to expand %s: %s", entry, e)
                report.errors.append(f"{entry}: {e}")
                continue
            paths.extend(canonicalize(expanded))
        return paths

    def _select_entries(self, profile: Profile) -> list[Entry]:
        if self._mode != CleanMode.EVERY_ENTRY:
            return list(profile.entries)
        return [e for e in profile.entries if self._ask(f"Include entry [{e}]?")]

    def _clean_path(self, index: int, total: int, path: Path, report: CleanReport) -> None:
        if is_protected_path(str(path)):
            logger.warning("Refusing to remove protected path %s", path)
            report.protected.append(path)
            report.errors.append(f"Protected path cannot be removed: {path}")
            return

        if contains_protected_path(str(path)):
            logger.warning("Refusing to remove %s, it contains a protected path", path)
            report.protected.append(path)
            report.errors.append(f"Path containing a protected path cannot be removed: {path}")
            return

        if self._mode == CleanMode.EVERY_PATH:
            if not self._ask(f"Delete path <{path}>?"):
                report.skipped += 1
                return
        elif self._on_progress is not None:
            self._on_progress(index, total, path)

        def record_child_error(error: RemoveError) -> None:
            logger.warning("Skipping %s", error)
            report.errors.append(str(error))

        try:
            size = remove_path(path, on_error=record_child_error)
        except RemoveError as e:
            logger.warning("Failed to remove %s: %s", path, e)
            report.reclaimed_bytes += e.reclaimed
            report.errors.append(str(e))
            return

        report.removed += 1
        report.reclaimed_bytes += size

    def _ask(self, question: str) -> bool:
        if self._confirm is None:
            msg = f"Mode '{self._mode.value}' requires a confirm function"
            raise RuntimeError(msg)
        return self._confirm(question)
