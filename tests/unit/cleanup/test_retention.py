"""Unit tests for retention resolution.

Tests count-based retention, legacy exception rules, tie-breaking
and handling of unreadable metadata.
"""

# pyright: reportPrivateUsage=false

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
from cleanctl.cleanup import retention as retention_module
from cleanctl.cleanup.retention import (
    apply_exception,
    apply_retention,
    created_key,
    find_exception,
    modified_key,
)
from cleanctl.profile.models import PatternException, Retention, RetentionOrder


def _logs(log_dir: Path) -> list[Path]:
    """Log files in a fixed, non-sorted enumeration order."""
    return [log_dir / "mid.log", log_dir / "new.log", log_dir / "old.log"]


class TestApplyRetention:
    """Tests for count-based retention."""

    def test_keeps_newest_by_modified(self, log_dir: Path) -> None:
        """count=1 by modified returns the two oldest files."""
        result = apply_retention(
            _logs(log_dir), Retention(order=RetentionOrder.MODIFIED, count=1)
        )

        assert result == [log_dir / "mid.log", log_dir / "old.log"]

    def test_count_zero_returns_everything_sorted(self, log_dir: Path) -> None:
        """count=0 retains nothing and returns matches newest first."""
        result = apply_retention(
            _logs(log_dir), Retention(order=RetentionOrder.MODIFIED, count=0)
        )

        assert result == [log_dir / "new.log", log_dir / "mid.log", log_dir / "old.log"]

    @pytest.mark.parametrize("count", [3, 4, 100])
    def test_count_at_least_matches_returns_empty(self, log_dir: Path, count: int) -> None:
        """Retaining as many or more than matched deletes nothing."""
        result = apply_retention(
            _logs(log_dir), Retention(order=RetentionOrder.MODIFIED, count=count)
        )

        assert result == []

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 5])
    def test_result_length(self, log_dir: Path, count: int) -> None:
        """The deletion list has max(0, n - k) entries."""
        paths = _logs(log_dir)
        result = apply_retention(paths, Retention(order=RetentionOrder.MODIFIED, count=count))

        assert len(result) == max(0, len(paths) - count)

    def test_empty_matches(self) -> None:
        """No matches gives an empty deletion list."""
        assert apply_retention([], Retention(order=RetentionOrder.FILE_NAME, count=1)) == []

    def test_file_name_reverse_lexicographic(self, tmp_path: Path) -> None:
        """File name order keeps the names that sort last."""
        paths = [tmp_path / "b-2024-02", tmp_path / "c-2024-03", tmp_path / "a-2024-01"]

        result = apply_retention(paths, Retention(order=RetentionOrder.FILE_NAME, count=2))

        assert result == [tmp_path / "a-2024-01"]

    def test_file_name_uses_final_component(self, tmp_path: Path) -> None:
        """Only the final component is compared, not the parent directory."""
        paths = [tmp_path / "z" / "a.txt", tmp_path / "a" / "b.txt"]

        result = apply_retention(paths, Retention(order=RetentionOrder.FILE_NAME, count=1))

        assert result == [tmp_path / "z" / "a.txt"]

    def test_ties_keep_enumeration_order(
        self, tmp_path: Path, make_file: Callable[..., Path]
    ) -> None:
        """Equal keys keep their original relative order."""
        paths = [
            make_file(tmp_path / name, mtime=5_000_000) for name in ("first", "second", "third")
        ]

        result = apply_retention(paths, Retention(order=RetentionOrder.MODIFIED, count=1))

        assert result == paths[1:]

    def test_unreadable_metadata_sorts_last(
        self, tmp_path: Path, make_file: Callable[..., Path]
    ) -> None:
        """A path whose metadata cannot be read ranks lowest and is deleted."""
        missing = tmp_path / "vanished.log"
        old = make_file(tmp_path / "old.log", mtime=1_000_000)
        new = make_file(tmp_path / "new.log", mtime=2_000_000)

        result = apply_retention(
            [missing, old, new], Retention(order=RetentionOrder.MODIFIED, count=2)
        )

        assert result == [missing]

    def test_created_order_uses_created_key(self, tmp_path: Path) -> None:
        """Created order ranks by creation time."""
        paths = [tmp_path / "a", tmp_path / "b", tmp_path / "c"]
        times = {paths[0]: (True, 20.0), paths[1]: (True, 30.0), paths[2]: (True, 10.0)}

        with patch.object(retention_module, "created_key", side_effect=times.__getitem__):
            result = apply_retention(paths, Retention(order=RetentionOrder.CREATED, count=1))

        assert result == [paths[0], paths[2]]


class TestSortKeys:
    """Tests for metadata sort keys."""

    def test_modified_key_reads_mtime(self, tmp_path: Path, make_file: Callable[..., Path]) -> None:
        """modified_key returns the file's modification time."""
        path = make_file(tmp_path / "f", mtime=1_234_567)

        assert modified_key(path) == (True, 1_234_567.0)

    def test_missing_path_is_unavailable(self, tmp_path: Path) -> None:
        """Metadata errors yield the lowest-ranking key."""
        assert modified_key(tmp_path / "missing") == (False, 0.0)
        assert created_key(tmp_path / "missing") == (False, 0.0)

    def test_unavailable_ranks_below_epoch(self, tmp_path: Path) -> None:
        """The unavailable key sorts below even a zero timestamp."""
        assert modified_key(tmp_path / "missing") < (True, 0.0)

    def test_created_key_prefers_birthtime(self) -> None:
        """st_birthtime is used when the platform provides it."""
        class WithoutBirth:
            st_ctime = 7.0

        class WithBirth:
            st_birthtime = 42.0
            st_ctime = 7.0

        assert retention_module._created_time(WithBirth()) == 42.0  # type: ignore[arg-type]
        assert retention_module._created_time(WithoutBirth()) == 7.0  # type: ignore[arg-type]


class TestExceptions:
    """Tests for legacy single-exclusion rules."""

    def test_first_ascending_keeps_smallest_name(self, log_dir: Path) -> None:
        """firstAscending keeps the alphabetically first match."""
        result = apply_exception(_logs(log_dir), PatternException.FIRST_ASCENDING)

        assert result == [log_dir / "new.log", log_dir / "old.log"]

    def test_first_descending_keeps_largest_name(self, log_dir: Path) -> None:
        """firstDescending keeps the alphabetically last match."""
        result = apply_exception(_logs(log_dir), PatternException.FIRST_DESCENDING)

        assert result == [log_dir / "mid.log", log_dir / "new.log"]

    def test_most_recent_keeps_newest(self, log_dir: Path) -> None:
        """mostRecent keeps the most recently modified match."""
        result = apply_exception(_logs(log_dir), PatternException.MOST_RECENT)

        assert result == [log_dir / "mid.log", log_dir / "old.log"]

    def test_most_recent_ignores_creation_order(
        self, tmp_path: Path, make_file: Callable[..., Path]
    ) -> None:
        """mostRecent ranks by modification time, not by when files appeared."""
        newer = make_file(tmp_path / "newer.bak", mtime=2_000_000)
        older = make_file(tmp_path / "older.bak", mtime=1_000_000)

        result = apply_exception([newer, older], PatternException.MOST_RECENT)

        assert result == [older]

    @pytest.mark.parametrize("exception", list(PatternException))
    def test_empty_matches_delete_nothing(self, exception: PatternException) -> None:
        """No exclusion target means nothing is deleted."""
        assert find_exception([], exception) is None
        assert apply_exception([], exception) == []

    @pytest.mark.parametrize("exception", list(PatternException))
    def test_single_match_is_kept(self, log_dir: Path, exception: PatternException) -> None:
        """A lone match is always the excluded one."""
        assert apply_exception([log_dir / "old.log"], exception) == []

    def test_most_recent_ties_pick_last(
        self, tmp_path: Path, make_file: Callable[..., Path]
    ) -> None:
        """Among equally recent matches the last enumerated is kept."""
        paths = [make_file(tmp_path / name, mtime=9_000_000) for name in ("a", "b", "c")]

        assert find_exception(paths, PatternException.MOST_RECENT) == paths[-1]

    def test_most_recent_all_unreadable_picks_last(self, tmp_path: Path) -> None:
        """With no readable metadata the last match is kept."""
        paths = [tmp_path / "gone1", tmp_path / "gone2"]

        assert apply_exception(paths, PatternException.MOST_RECENT) == [tmp_path / "gone1"]
