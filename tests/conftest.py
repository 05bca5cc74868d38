# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from amwire import Container


@pytest.fixture
def container() -> Container:
    """Return an empty container."""
    return Container()


@pytest.fixture
def examples_dir() -> Path:
    """Return the directory holding the example descriptors."""
    return Path(__file__).resolve().parent / "wiring" / "examples"


@pytest.fixture
def di_module_path(examples_dir: Path) -> Path:
    return examples_dir / "di_module.py"


@pytest.fixture
def config_module_path(examples_dir: Path) -> Path:
    return examples_dir / "config_module.py"
