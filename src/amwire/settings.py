# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wiring settings read from ``[tool.amwire]`` in ``pyproject.toml``."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .wiring.loaders import JSON_SUFFIX, PYTHON_SUFFIX, TOML_SUFFIX
from .wiring.wire import DEFAULT_CONFIG_ATTRIBUTE, DEFAULT_SERVICES_ATTRIBUTE

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "amwire"
_FILE_SUFFIXES: Final[frozenset[str]] = frozenset({PYTHON_SUFFIX, TOML_SUFFIX, JSON_SUFFIX})


class SettingsError(Exception):
    """Raised when the ``[tool.amwire]`` section is invalid."""


class WireSettings(BaseModel):
    """Options controlling how the CLI wires a services descriptor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    services: str | None = None
    config: str | None = None
    services_attribute: str = Field(default=DEFAULT_SERVICES_ATTRIBUTE, min_length=1)
    config_attribute: str = Field(default=DEFAULT_CONFIG_ATTRIBUTE, min_length=1)
    use_color: bool = True
    use_emoji: bool = True

    def with_overrides(self, **overrides: Any) -> WireSettings:
        """Return a copy with the non-``None`` ``overrides`` applied.

        Args:
            **overrides: Field values supplied on the command line.

        Returns:
            WireSettings: Updated settings instance.
        """

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return self.model_validate({**self.model_dump(), **updates})

    def resolve_source(self, value: str | None, root: Path) -> str | None:
        """Return ``value`` anchored at ``root`` when it names a relative file.

        Dotted module names are returned untouched.

        Args:
            value: Services or config source as configured.
            root: Project root used to resolve relative paths.

        Returns:
            str | None: Absolute path, module name, or ``None``.
        """

        if value is None:
            return None
        candidate = Path(value).expanduser()
        if candidate.suffix.lower() in _FILE_SUFFIXES or "/" in value or os.sep in value:
            return str(candidate if candidate.is_absolute() else (root / candidate).resolve())
        return value


def load_settings(root: Path) -> WireSettings:
    """Load :class:`WireSettings` from ``root/pyproject.toml``.

    Args:
        root: Project root containing the optional ``pyproject.toml``.

    Returns:
        WireSettings: Parsed settings, or defaults when nothing is configured.

    Raises:
        SettingsError: If the file cannot be parsed or the section is invalid.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return WireSettings()
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsError(f"Invalid TOML in {path}: {exc}") from exc

    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return WireSettings()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return WireSettings()
    if not isinstance(section, Mapping):
        raise SettingsError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    try:
        return WireSettings.model_validate(dict(section))
    except ValidationError as exc:
        raise SettingsError(f"Invalid [tool.{PYPROJECT_SECTION_KEY}] in {path}: {exc}") from exc


__all__ = [
    "PYPROJECT_FILENAME",
    "SettingsError",
    "WireSettings",
    "load_settings",
]
