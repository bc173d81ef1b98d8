"""dirkit configuration and settings.

This module provides the configuration model and I/O functions for the
defaults the CLI applies to walks, searches and copies.

Configuration is stored in ~/.config/dirkit/config.toml:

    [walk]
    show_hidden = false

    [search]
    exact_match = false
    case_sensitive = true

    [copy]
    replace = true
    delete_source = false
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dirkit.core.paths import ensure_config_dir, get_config_path
from dirkit.errors import ConfigError, ConfigNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)


class WalkSettings(BaseModel):
    """Defaults for directory walks.

    Attributes:
        show_hidden: Include hidden entries in walks.
    """

    model_config = ConfigDict(extra="forbid")

    show_hidden: Annotated[bool, Field(description="Include hidden entries")] = False


class SearchSettings(BaseModel):
    """Defaults for name searches.

    Attributes:
        exact_match: Require the whole name to equal the key.
        case_sensitive: Compare names case-sensitively.
    """

    model_config = ConfigDict(extra="forbid")

    exact_match: Annotated[bool, Field(description="Match whole names only")] = False
    case_sensitive: Annotated[bool, Field(description="Case-sensitive comparison")] = True


class CopySettings(BaseModel):
    """Defaults for bulk copies.

    Attributes:
        replace: Overwrite existing destinations.
        delete_source: Remove sources after a successful copy.
    """

    model_config = ConfigDict(extra="forbid")

    replace: Annotated[bool, Field(description="Overwrite existing destinations")] = True
    delete_source: Annotated[bool, Field(description="Remove sources after copying")] = False


class DirkitConfig(BaseModel):
    """Top-level dirkit configuration.

    Attributes:
        walk: Walk defaults.
        search: Search defaults.
        copy_settings: Copy defaults, stored under the [copy] table.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    walk: Annotated[WalkSettings, Field(default_factory=WalkSettings)]
    search: Annotated[SearchSettings, Field(default_factory=SearchSettings)]
    copy_settings: Annotated[
        CopySettings,
        Field(default_factory=CopySettings, alias="copy"),
    ]


def load_config(path: Path | None = None) -> DirkitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated DirkitConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        config = DirkitConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config


def load_config_or_default(path: Path | None = None) -> DirkitConfig:
    """Load configuration, falling back to defaults if the file is missing.

    Parse and schema errors still propagate so a broken file is never
    silently ignored.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default DirkitConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return DirkitConfig()


def save_config(config: DirkitConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The DirkitConfig object to save.
        path: Path to save the config. If None, uses the default config path,
            creating its directory first.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
        config_path = get_config_path()
    else:
        config_path = path

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config.model_dump(by_alias=True), f)
        # os.replace() is atomic on POSIX
        os.replace(tmp_path, config_path)
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
