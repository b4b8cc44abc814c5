"""Semantic version value type.

A Version is parsed from a string with the regular expression suggested at
https://semver.org, and every transformation returns a new Version. Absent
pre-release and build metadata are represented by the empty string.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

# Leading and trailing characters dropped before matching: ASCII control
# characters and space. Unicode whitespace such as U+00A0 is kept.
_TRIMMED = "".join(chr(code) for code in range(0x21))


class PatchLevel(str, Enum):
    """The component of a version to increment."""

    MAJOR = "MAJOR"
    MINOR = "MINOR"
    PATCH = "PATCH"


class VersionFormatError(ValueError):
    """Raised when a string is not a valid semantic version.

    Attributes:
        text: The rejected input, exactly as it was passed to the parser.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            "Wrong version format - expected "
            f"MAJOR.MINOR.PATCH(-PRERELEASE+BUILDMETADATA) - got {text}"
        )


class Version(BaseModel):
    """An immutable semantic version.

    Build one with Version.parse() to get grammar validation. Direct
    construction only checks field types and is meant for values whose parts
    are already known to be valid.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        pre_release: Dot-separated pre-release label, or "" when absent.
        build_metadata: Dot-separated build metadata, or "" when absent.
    """

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build_metadata: str = ""

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string, ignoring surrounding ASCII whitespace.

        Raises:
            VersionFormatError: If the string does not match the semver grammar.
        """
        match = SEMVER_PATTERN.match(text.strip(_TRIMMED))
        if match is None:
            raise VersionFormatError(text)
        major, minor, patch, pre_release, build_metadata = match.groups()
        return cls(
            major=int(major),
            minor=int(minor),
            patch=int(patch),
            pre_release=pre_release or "",
            build_metadata=build_metadata or "",
        )

    def bump(self, level: PatchLevel | str) -> Version:
        """Increment one component, zeroing the components below it.

        Pre-release and build metadata are kept as they are; use
        reset_pre_release() / reset_build_metadata() for a clean release.
        """
        level = PatchLevel(level)
        if level is PatchLevel.MAJOR:
            return self.model_copy(
                update={"major": self.major + 1, "minor": 0, "patch": 0}
            )
        if level is PatchLevel.MINOR:
            return self.model_copy(update={"minor": self.minor + 1, "patch": 0})
        return self.model_copy(update={"patch": self.patch + 1})

    def with_pre_release(self, pre_release: str) -> Version:
        """Return a copy with the given pre-release label.

        The label is not checked against the grammar.
        """
        return self.model_copy(update={"pre_release": pre_release})

    def with_build_metadata(self, build_metadata: str) -> Version:
        """Return a copy with the given build metadata (not checked either)."""
        return self.model_copy(update={"build_metadata": build_metadata})

    def reset_pre_release(self) -> Version:
        """Return a copy without a pre-release label."""
        return self.model_copy(update={"pre_release": ""})

    def reset_build_metadata(self) -> Version:
        """Return a copy without build metadata."""
        return self.model_copy(update={"build_metadata": ""})

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            text += f"-{self.pre_release}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text


def parse_version(version_str: str) -> Version:
    """Parse a version string into a Version object.

    Unlike lenient parsers, incomplete versions are rejected:
    - "1.2.3" → Version(major=1, minor=2, patch=3)
    - "1.2" → VersionFormatError
    """
    return Version.parse(version_str)


def bump_version(version_str: str, level: PatchLevel | str) -> str:
    """Bump a version string and return the rendered result.

    Examples:
        "1.2.3", MINOR → "1.3.0"
        "0.1.2-SNAPSHOT", PATCH → "0.1.3-SNAPSHOT"
    """
    return str(parse_version(version_str).bump(level))
