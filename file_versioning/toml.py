"""pyproject.toml reading utilities.

Uses tomlkit, the same parser used to edit pyproject.toml files, so that
settings are read exactly as the user wrote them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit

from .models import FileVersioningConfig

TOOL_NAME = "file-versioning"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def get_tool_settings(doc: tomlkit.TOMLDocument) -> Any:
    """Extract the [tool.file-versioning] value as builtin Python data.

    Returns an empty dict when the table (or [tool] itself) is missing. A
    value that is not a table is returned as is, so that validation against
    FileVersioningConfig reports it.
    """
    # unwrap() turns tomlkit items into builtin str/int/dict values
    tool = doc.unwrap().get("tool", {})
    if not isinstance(tool, dict):
        return tool
    return tool.get(TOOL_NAME, {})


def load_config(root: Path) -> FileVersioningConfig:
    """Load settings from root/pyproject.toml, falling back to defaults.

    Raises:
        pydantic.ValidationError: If the settings are not a table, hold
            unknown keys or an unparseable start-version.
        tomlkit.exceptions.TOMLKitError: If pyproject.toml is not valid TOML.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return FileVersioningConfig()
    return FileVersioningConfig.model_validate(
        get_tool_settings(load_pyproject(pyproject))
    )
