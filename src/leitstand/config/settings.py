# topmark:header:start
#
#   project      : Leitstand Commons
#   file         : settings.py
#   file_relpath : src/leitstand/config/settings.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Leitstand Authors
#
# topmark:header:end

"""Logging settings from TOML files and environment variables.

Sources, from lowest to highest precedence:

1. built-in defaults,
2. the ``[logging]`` table of ``leitstand.toml`` or the
   ``[tool.leitstand.logging]`` table of ``pyproject.toml``,
3. the ``LEITSTAND_LOG_LEVEL`` and ``LEITSTAND_LOG_PATTERN`` environment variables.

Example ``leitstand.toml``:

```toml
[logging]
pattern = "%d{yyyy-MM-dd HH:mm:ss.SSS} (%c.1) [%t] %p %s%1x%1e"
level = "INFO"
utc_offset = 120   # minutes; omit for the local zone
color = false
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from datetime import timedelta, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from leitstand.config.logging import (
    DEFAULT_PATTERN,
    LOG_LEVEL_ENV,
    get_logger,
    parse_log_level,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import tzinfo

    from leitstand.config.logging import LeitstandLogger

logger: LeitstandLogger = get_logger(__name__)

SETTINGS_FILE_NAME: Final[str] = "leitstand.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
LOG_PATTERN_ENV: Final[str] = "LEITSTAND_LOG_PATTERN"


class SettingsError(Exception):
    """Configuration file or value is missing, malformed or invalid."""


@dataclass(frozen=True)
class LoggingSettings:
    """Effective logging settings.

    Attributes:
        pattern (str): Log pattern of the console handler.
        level (int | None): Root logger level, or None to fall back to the default.
        utc_offset (int | None): Rendering zone offset in minutes, None for local time.
        color (bool): Whether lines are colored by severity.
    """

    pattern: str = DEFAULT_PATTERN
    level: int | None = None
    utc_offset: int | None = None
    color: bool = True

    @property
    def zone(self) -> tzinfo | None:
        """Return the rendering zone for ``%d`` parameters."""
        if self.utc_offset is None:
            return None
        return timezone(timedelta(minutes=self.utc_offset))


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise SettingsError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise SettingsError(f"Error decoding TOML from {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("dict[str, Any]", data) if isinstance(data, dict) else {}


def logging_table(data: Mapping[str, Any], *, pyproject: bool) -> Mapping[str, Any]:
    """Return the logging table of a parsed settings or ``pyproject.toml`` document."""
    node: Any = data
    path = ("tool", "leitstand", "logging") if pyproject else ("logging",)
    for name in path:
        node = node.get(name) if isinstance(node, dict) else None
    return cast("Mapping[str, Any]", node) if isinstance(node, dict) else {}


def apply_table(settings: LoggingSettings, table: Mapping[str, Any]) -> LoggingSettings:
    """Overlay the values of a logging table onto ``settings``.

    Raises:
        SettingsError: On values of the wrong type or unknown level names.
    """
    changes: dict[str, Any] = {}
    for key, value in table.items():
        if key == "pattern":
            if not isinstance(value, str):
                raise SettingsError(f"logging.pattern must be a string, got {value!r}")
            changes["pattern"] = value
        elif key == "level":
            level = parse_log_level(value) if isinstance(value, (str, int)) else None
            if level is None:
                raise SettingsError(f"Unknown logging.level {value!r}")
            changes["level"] = level
        elif key == "utc_offset":
            if not isinstance(value, int) or isinstance(value, bool):
                raise SettingsError(f"logging.utc_offset must be an integer, got {value!r}")
            changes["utc_offset"] = value
        elif key == "color":
            if not isinstance(value, bool):
                raise SettingsError(f"logging.color must be a boolean, got {value!r}")
            changes["color"] = value
        else:
            logger.warning("Ignoring unknown logging setting %r", key)
    return replace(settings, **changes)


def apply_env(settings: LoggingSettings, env: Mapping[str, str]) -> LoggingSettings:
    """Overlay ``LEITSTAND_LOG_LEVEL`` and ``LEITSTAND_LOG_PATTERN`` onto ``settings``."""
    changes: dict[str, Any] = {}
    pattern = env.get(LOG_PATTERN_ENV)
    if pattern:
        changes["pattern"] = pattern
    raw_level = env.get(LOG_LEVEL_ENV)
    if raw_level:
        level = parse_log_level(raw_level)
        if level is None:
            logger.warning("Ignoring unknown %s=%r", LOG_LEVEL_ENV, raw_level)
        else:
            changes["level"] = level
    return replace(settings, **changes)


def discover_settings_file(directory: Path) -> Path | None:
    """Return ``leitstand.toml`` or ``pyproject.toml`` in ``directory``, in that order."""
    for name in (SETTINGS_FILE_NAME, PYPROJECT_FILE_NAME):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(
    path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    discover: bool = True,
) -> LoggingSettings:
    """Resolve the effective logging settings.

    Args:
        path (Path | None): Explicit settings file. ``pyproject.toml`` files are
            read from ``[tool.leitstand.logging]``, others from ``[logging]``.
        env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.
        discover (bool): Look for a settings file in the working directory when
            ``path`` is None.

    Returns:
        LoggingSettings: The merged settings.

    Raises:
        SettingsError: If the settings file is unreadable or contains invalid values.
    """
    settings = LoggingSettings()
    if path is None and discover:
        path = discover_settings_file(Path.cwd())
    if path is not None:
        logger.debug("Loading logging settings from %s", path)
        data = load_toml_dict(path)
        settings = apply_table(settings, logging_table(data, pyproject=path.name == PYPROJECT_FILE_NAME))
    return apply_env(settings, os.environ if env is None else env)
