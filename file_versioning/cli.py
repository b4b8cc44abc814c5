"""CLI entry point for file-versioning."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from file_versioning.models import FileVersioningConfig
from file_versioning.toml import load_config
from file_versioning.versionfile import (
    ensure_version_file,
    read_version,
    set_version,
    update_version,
)
from file_versioning.versions import PatchLevel, Version, VersionFormatError

_ERRORS = (VersionFormatError, ValidationError, TOMLKitError, OSError)


def _version_file(config: FileVersioningConfig) -> Path:
    """Resolve the version file, creating it with the start version if needed."""
    path = config.version_path(Path.cwd())
    try:
        created = ensure_version_file(path, config.start_version)
    except OSError as exc:
        raise click.ClickException(str(exc)) from exc
    if created:
        click.echo(f"Created {path.name} with start version {config.start_version}")
    return path


def _apply(
    config: FileVersioningConfig, transform: Callable[[Version], Version]
) -> None:
    path = _version_file(config)
    try:
        change = update_version(path, transform)
    except _ERRORS as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"{change.old} → {change.new}")


@click.group()
@click.version_option(package_name="file-versioning")
@click.option(
    "--file",
    "version_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Version file to manage. (default: from pyproject.toml, else version.txt)",
)
@click.pass_context
def cli(ctx: click.Context, version_file: Path | None) -> None:
    """Keep a semantic version in a plain text file."""
    try:
        config = load_config(Path.cwd())
    except _ERRORS as exc:
        raise click.ClickException(
            f"Invalid [tool.file-versioning] settings: {exc}"
        ) from exc
    if version_file is not None:
        config = config.model_copy(update={"version_file": str(version_file)})
    ctx.obj = config


@cli.command()
@click.pass_obj
def init(config: FileVersioningConfig) -> None:
    """Create the version file with the start version."""
    path = config.version_path(Path.cwd())
    if path.exists():
        click.echo(f"{path.name} already exists, leaving it unchanged.")
        return
    _version_file(config)


@cli.command()
@click.pass_obj
def show(config: FileVersioningConfig) -> None:
    """Print the current version."""
    path = _version_file(config)
    try:
        version = read_version(path)
    except _ERRORS as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(str(version))


@cli.command("set")
@click.argument("new_version")
@click.pass_obj
def set_(config: FileVersioningConfig, new_version: str) -> None:
    """Set the version, e.g. "file-versioning set 0.1.2"."""
    path = _version_file(config)
    try:
        change = set_version(path, new_version)
    except _ERRORS as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"{change.old} → {change.new}")


@cli.command()
@click.argument(
    "level",
    type=click.Choice([level.value for level in PatchLevel], case_sensitive=False),
)
@click.pass_obj
def bump(config: FileVersioningConfig, level: str) -> None:
    """Bump the version a patch level (MAJOR, MINOR or PATCH)."""
    patch_level = PatchLevel(level.upper())
    _apply(config, lambda version: version.bump(patch_level))


@cli.command()
@click.pass_obj
def snapshot(config: FileVersioningConfig) -> None:
    """Apply the snapshot label (default SNAPSHOT) as pre-release."""
    _apply(config, lambda version: version.with_pre_release(config.snapshot_label))


@cli.command("pre-release")
@click.argument("label")
@click.pass_obj
def pre_release(config: FileVersioningConfig, label: str) -> None:
    """Set the pre-release label, e.g. RC.1."""
    _apply(config, lambda version: version.with_pre_release(label))


@cli.command("build-metadata")
@click.argument("label")
@click.pass_obj
def build_metadata(config: FileVersioningConfig, label: str) -> None:
    """Set the build metadata, e.g. build.12."""
    _apply(config, lambda version: version.with_build_metadata(label))


@cli.command("reset-pre-release")
@click.pass_obj
def reset_pre_release(config: FileVersioningConfig) -> None:
    """Remove the pre-release label (e.g. SNAPSHOT) from the version."""
    _apply(config, lambda version: version.reset_pre_release())


@cli.command("reset-build-metadata")
@click.pass_obj
def reset_build_metadata(config: FileVersioningConfig) -> None:
    """Remove the build metadata from the version."""
    _apply(config, lambda version: version.reset_build_metadata())


if __name__ == "__main__":
    cli()
