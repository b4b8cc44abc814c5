"""Data models for file-versioning.

These Pydantic models hold the tool settings and the record of a version
file update.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from .versions import Version

DEFAULT_VERSION_FILE = "version.txt"
START_VERSION = "0.0.1"
SNAPSHOT_LABEL = "SNAPSHOT"


class FileVersioningConfig(BaseModel):
    """Settings read from [tool.file-versioning] in pyproject.toml.

    Keys in TOML use hyphens (version-file); attribute names use underscores.

    Attributes:
        version_file: Path to the version file. Relative paths are resolved
                      against the project root.
        start_version: Version written when the version file does not exist.
                       Stored in canonical form.
        snapshot_label: Pre-release label applied by the snapshot command.
    """

    model_config = ConfigDict(
        alias_generator=lambda name: name.replace("_", "-"),
        populate_by_name=True,
        extra="forbid",
    )

    version_file: str = DEFAULT_VERSION_FILE
    start_version: str = START_VERSION
    snapshot_label: str = SNAPSHOT_LABEL

    @field_validator("start_version")
    @classmethod
    def _canonical_start_version(cls, value: str) -> str:
        return str(Version.parse(value))

    def version_path(self, root: Path) -> Path:
        """Resolve the version file against the project root."""
        return root / self.version_file


class VersionChange(BaseModel):
    """Records one rewrite of the version file.

    Attributes:
        old: The version before the change.
        new: The version after the change.
    """

    old: str
    new: str
