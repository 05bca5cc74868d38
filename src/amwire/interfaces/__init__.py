# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol definitions shared by the container and its collaborators."""

from .runtime import ServiceFactory, ServiceProvider, ServiceRegistryProtocol

__all__ = [
    "ServiceFactory",
    "ServiceProvider",
    "ServiceRegistryProtocol",
]
