# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Descriptor loading and container wiring."""

from .loaders import DescriptorSource, load_config, load_services
from .wire import CONFIG_SERVICE, Wire, complete_config

__all__ = [
    "CONFIG_SERVICE",
    "DescriptorSource",
    "Wire",
    "complete_config",
    "load_config",
    "load_services",
]
