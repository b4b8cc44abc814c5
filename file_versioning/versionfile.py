"""Version file reading and writing.

The version file holds a single line: the rendered version followed by a
newline. Every rewrite goes through Version, so the file always contains a
canonical version string.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .models import START_VERSION, VersionChange
from .versions import Version


def read_version(path: Path) -> Version:
    """Parse the version stored in path.

    Raises:
        FileNotFoundError: If the file does not exist.
        VersionFormatError: If the file content is not a valid version,
            including content that is not valid UTF-8.
    """
    # undecodable bytes become U+FFFD, which the grammar rejects
    return Version.parse(path.read_text(errors="replace"))


def write_version(path: Path, version: Version | str) -> None:
    """Write a version to path, terminated by a newline."""
    path.write_text(f"{version}\n")


def get_version_from_file(path: Path) -> str | None:
    """Return the canonical version string stored in path, or None if missing."""
    if not path.exists():
        return None
    return str(read_version(path))


def ensure_version_file(path: Path, start_version: str = START_VERSION) -> bool:
    """Create the version file with start_version if it does not exist yet.

    Args:
        path: Location of the version file.
        start_version: Initial content. Validated before anything is written.

    Returns:
        True if the file was created, False if it already existed.
    """
    if path.exists():
        return False
    version = Version.parse(start_version)
    path.parent.mkdir(parents=True, exist_ok=True)
    write_version(path, version)
    return True


def update_version(
    path: Path, transform: Callable[[Version], Version]
) -> VersionChange:
    """Read the version, apply transform, and write the result back.

    Args:
        path: Location of the version file.
        transform: Function producing the new version from the current one,
                   e.g. ``lambda v: v.bump(PatchLevel.MINOR)``.

    Returns:
        VersionChange with the rendered old and new versions.
    """
    current = read_version(path)
    updated = transform(current)
    write_version(path, updated)
    return VersionChange(old=str(current), new=str(updated))


def set_version(path: Path, version_str: str) -> VersionChange:
    """Replace the stored version with version_str.

    The new version is validated first; on a VersionFormatError the file is
    left untouched. The old content is not parsed, so a corrupt file can be
    repaired this way. A missing file is reported as old="".
    """
    new = Version.parse(version_str)
    old = path.read_text(errors="replace").strip() if path.exists() else ""
    write_version(path, new)
    return VersionChange(old=old, new=str(new))
