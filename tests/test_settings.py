# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from pathlib import Path

import pytest

from amwire.settings import SettingsError, WireSettings, load_settings


def test_load_settings_defaults_without_pyproject(tmp_path: Path) -> None:
    assert load_settings(tmp_path) == WireSettings()


def test_load_settings_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n", encoding="utf-8")

    assert load_settings(tmp_path) == WireSettings()


def test_load_settings_reads_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.amwire]\nservices = 'app/di.py'\nconfig = 'app/config.toml'\nuse_emoji = false\n",
        encoding="utf-8",
    )

    settings = load_settings(tmp_path)

    assert settings.services == "app/di.py"
    assert settings.config == "app/config.toml"
    assert settings.use_emoji is False
    assert settings.services_attribute == "SERVICES"


def test_load_settings_rejects_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.amwire]\nservice = 'typo.py'\n", encoding="utf-8")

    with pytest.raises(SettingsError):
        load_settings(tmp_path)


def test_load_settings_rejects_invalid_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.amwire\n", encoding="utf-8")

    with pytest.raises(SettingsError):
        load_settings(tmp_path)


def test_with_overrides_ignores_none() -> None:
    settings = WireSettings(services="di.py", config="config.py")

    updated = settings.with_overrides(services=None, config="other.toml", use_color=False)

    assert updated.services == "di.py"
    assert updated.config == "other.toml"
    assert updated.use_color is False
    assert settings.with_overrides(services=None) is settings


def test_resolve_source(tmp_path: Path) -> None:
    settings = WireSettings()

    assert settings.resolve_source(None, tmp_path) is None
    assert settings.resolve_source("package.services", tmp_path) == "package.services"
    assert settings.resolve_source("app/di.py", tmp_path) == str((tmp_path / "app" / "di.py").resolve())
    absolute = str(tmp_path / "di.py")
    assert settings.resolve_source(absolute, Path("/elsewhere")) == absolute
