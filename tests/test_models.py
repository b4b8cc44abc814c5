"""Tests for file_versioning.models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from file_versioning.models import FileVersioningConfig, VersionChange


class TestFileVersioningConfig:
    def test_defaults(self) -> None:
        config = FileVersioningConfig()
        assert config.version_file == "version.txt"
        assert config.start_version == "0.0.1"
        assert config.snapshot_label == "SNAPSHOT"

    def test_reads_hyphenated_keys(self) -> None:
        config = FileVersioningConfig.model_validate(
            {"version-file": "VERSION", "start-version": "1.0.0"}
        )
        assert config.version_file == "VERSION"
        assert config.start_version == "1.0.0"

    def test_accepts_attribute_names(self) -> None:
        config = FileVersioningConfig(snapshot_label="dev")
        assert config.snapshot_label == "dev"

    def test_start_version_is_canonical(self) -> None:
        config = FileVersioningConfig(start_version=" 0.1.0-alpha \n")
        assert config.start_version == "0.1.0-alpha"

    def test_rejects_invalid_start_version(self) -> None:
        with pytest.raises(ValidationError, match="Wrong version format"):
            FileVersioningConfig(start_version="1.0")

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValidationError):
            FileVersioningConfig.model_validate({"versionfile": "VERSION"})

    def test_version_path_relative(self, tmp_path: Path) -> None:
        config = FileVersioningConfig(version_file="etc/version.txt")
        assert config.version_path(tmp_path) == tmp_path / "etc" / "version.txt"

    def test_version_path_absolute(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "VERSION"
        config = FileVersioningConfig(version_file=str(target))
        assert config.version_path(Path("/some/root")) == target


class TestVersionChange:
    def test_create(self) -> None:
        change = VersionChange(old="1.0.0", new="1.0.1")
        assert change.old == "1.0.0"
        assert change.new == "1.0.1"
