"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit


@pytest.fixture
def version_file(tmp_path: Path) -> Path:
    """Create a version file holding a fully decorated version."""
    path = tmp_path / "version.txt"
    path.write_text("0.1.2-SNAPSHOT+build.12\n")
    return path


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml with file-versioning settings."""
    content = """\
[project]
name = "test-package"

[tool.file-versioning]
version-file = "VERSION"
start-version = "1.0.0"
snapshot-label = "dev"
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """Create a sample TOML document."""
    content = """\
[project]
name = "my-package"
dependencies = ["click>=8.0"]

[tool.ruff]
line-length = 88

[tool.file-versioning]
version-file = "etc/version.txt"
"""
    return tomlkit.parse(content)
