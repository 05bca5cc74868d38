# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Minimal dependency injection container and descriptor wiring."""

from __future__ import annotations

from importlib import metadata

from .core import Container, FactoryService, ValueService
from .errors import ContainerError, ContainerErrorReason, ServiceError, WireError, WireErrorReason
from .wiring import Wire

__all__ = [
    "Container",
    "ContainerError",
    "ContainerErrorReason",
    "FactoryService",
    "ServiceError",
    "ValueService",
    "Wire",
    "WireError",
    "WireErrorReason",
    "__version__",
]

try:
    __version__ = metadata.version("amwire")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
