# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Container core (registration, resolution, tagging)."""

from .container import MAIN_TAG, Container
from .introspection import FactorySignature, inspect_factory
from .specs import FactoryService, ServiceDefinition, ValueService, normalise_spec

__all__ = [
    "MAIN_TAG",
    "Container",
    "FactoryService",
    "FactorySignature",
    "ServiceDefinition",
    "ValueService",
    "inspect_factory",
    "normalise_spec",
]
