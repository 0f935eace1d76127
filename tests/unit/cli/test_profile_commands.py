"""Unit tests for profile management commands."""

import json
from pathlib import Path

import pytest
from cleanctl.cli.commands.profile import create_starter_profile
from cleanctl.cli.main import app
from cleanctl.profile.loader import load_profile
from typer.testing import CliRunner

runner = CliRunner()


class TestProfileValidate:
    """Tests for cleanctl profile validate."""

    def test_valid_profile(self, tmp_path: Path) -> None:
        """A valid profile is shown as a table."""
        path = tmp_path / "p.json"
        path.write_text(
            json.dumps(
                {
                    "name": "caches",
                    "entries": [
                        {"type": "path", "path": "/tmp/build"},
                        {
                            "type": "pattern",
                            "pattern": "/tmp/*.log",
                            "retention": {"order": "modified", "count": 2},
                        },
                    ],
                }
            )
        )

        result = runner.invoke(app, ["profile", "validate", str(path)])

        assert result.exit_code == 0
        assert "caches" in result.stdout
        assert "/tmp/build" in result.stdout
        assert "keep 2 by modified" in result.stdout
        assert "is valid (2 entries)" in result.stdout

    def test_invalid_profile(self, tmp_path: Path) -> None:
        """An invalid profile exits with code 1."""
        path = tmp_path / "p.json"
        path.write_text(json.dumps({"name": "x", "entries": [{"type": "nope"}]}))

        result = runner.invoke(app, ["profile", "validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid profile content" in result.output


class TestProfileInit:
    """Tests for cleanctl profile init."""

    @pytest.mark.parametrize("suffix", [".json", ".toml"])
    def test_writes_loadable_profile(self, tmp_path: Path, suffix: str) -> None:
        """The starter profile is written and loads back."""
        path = tmp_path / f"starter{suffix}"

        result = runner.invoke(app, ["profile", "init", str(path), "--name", "mine"])

        assert result.exit_code == 0
        assert load_profile(path) == create_starter_profile("mine")

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """Existing files are kept unless --force is given."""
        path = tmp_path / "p.json"
        path.write_text("keep me")

        result = runner.invoke(app, ["profile", "init", str(path)])

        assert result.exit_code == 1
        assert path.read_text() == "keep me"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing file."""
        path = tmp_path / "p.json"
        path.write_text("old")

        result = runner.invoke(app, ["profile", "init", str(path), "--force"])

        assert result.exit_code == 0
        assert load_profile(path).name == "example"


class TestProfileList:
    """Tests for cleanctl profile list."""

    def test_lists_named_profiles(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Profiles in the config directory are listed by name."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        profiles = tmp_path / "cleanctl" / "profiles"
        profiles.mkdir(parents=True)
        (profiles / "caches.json").write_text("{}")
        (profiles / "logs.toml").write_text("")
        (profiles / "README.md").write_text("")

        result = runner.invoke(app, ["profile", "list"])

        assert result.exit_code == 0
        assert "caches" in result.stdout
        assert "logs" in result.stdout
        assert "README" not in result.stdout

    def test_no_profiles_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A missing profiles directory is reported, not an error."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        result = runner.invoke(app, ["profile", "list"])

        assert result.exit_code == 0
        assert "No profiles directory" in result.stdout
