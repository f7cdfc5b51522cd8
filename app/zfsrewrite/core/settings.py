"""User settings.

Settings provide defaults for options that are tedious to repeat on every
invocation (the zfs executable, mount-point handling, entry ordering and
an optional per-file timeout). Command-line flags always win.

Settings are stored in ~/.config/zfs-rewrite-resume/settings.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zfsrewrite.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class RewriteSettings(BaseModel):
    """Persistent defaults for zfs-rewrite-resume.

    Attributes:
        zfs_command: zfs executable to run.
        one_file_system: Do not cross mount points by default.
        sort_entries: Use lexicographic order instead of listing order.
        action_timeout: Per-file timeout in seconds (None = no timeout).
    """

    model_config = ConfigDict(extra="forbid")

    zfs_command: Annotated[
        str,
        Field(min_length=1, description="zfs executable to run"),
    ] = "zfs"
    one_file_system: Annotated[
        bool,
        Field(description="Do not cross mount points"),
    ] = False
    sort_entries: Annotated[
        bool,
        Field(description="Sort directory entries by name"),
    ] = False
    action_timeout: Annotated[
        int | None,
        Field(ge=1, le=86400, description="Per-file timeout in seconds (1-86400)"),
    ] = None


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> RewriteSettings:
    """Load settings from a TOML file.

    A missing file is not an error; defaults are returned instead.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated RewriteSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or the content doesn't
            match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return RewriteSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return RewriteSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: RewriteSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The settings to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: RewriteSettings) -> dict[str, object]:
    """Convert settings to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are left out.
    """
    result: dict[str, object] = {
        "zfs_command": settings.zfs_command,
        "one_file_system": settings.one_file_system,
        "sort_entries": settings.sort_entries,
    }
    if settings.action_timeout is not None:
        result["action_timeout"] = settings.action_timeout
    return result
