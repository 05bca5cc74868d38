# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Populate a container from a services descriptor and its configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Final

from ..core.container import Container
from ..core.specs import ValueService
from ..errors import WireError, WireErrorReason
from .loaders import DescriptorSource, is_descriptor_source, load_config, load_services

CONFIG_SERVICE: Final[str] = "config"
DEFAULT_SERVICES_ATTRIBUTE: Final[str] = "SERVICES"
DEFAULT_CONFIG_ATTRIBUTE: Final[str] = "CONFIG"

LOGGER = logging.getLogger(__name__)


class Wire:
    """Wire the services of a descriptor into a fresh :class:`Container`.

    The configuration mapping is completed so that every service has an
    entry (``{}`` by default) and registered as the ``config`` service ahead
    of every other service, letting factories declare a ``config`` parameter.
    """

    def __init__(
        self,
        services: DescriptorSource | None,
        config: DescriptorSource | None = None,
        *,
        services_attribute: str = DEFAULT_SERVICES_ATTRIBUTE,
        config_attribute: str = DEFAULT_CONFIG_ATTRIBUTE,
    ) -> None:
        """Validate the descriptor sources.

        Args:
            services: Services descriptor as a mapping, ``.py`` path or module name.
            config: Optional configuration as a mapping, ``.py``/``.toml``/``.json``
                path or module name.
            services_attribute: Attribute read from Python services modules.
            config_attribute: Attribute read from Python configuration modules.

        Raises:
            WireError: If ``services`` is missing, or either source has an
                unsupported type.
        """

        if services is None:
            raise WireError(
                WireErrorReason.SERVICES_REQUIRED,
                "Invalid arg[services], must provide di module",
            )
        if not is_descriptor_source(services):
            raise WireError(
                WireErrorReason.INVALID_SERVICES,
                "Invalid arg[services], di module must be a path, module name or mapping",
            )
        if config is not None and not is_descriptor_source(config):
            raise WireError(
                WireErrorReason.INVALID_CONFIG,
                "Invalid arg[config], config module must be a path, module name or mapping",
            )
        self.services = services
        self.config = config
        self.services_attribute = services_attribute
        self.config_attribute = config_attribute
        self.container: Container | None = None

    def connect(self) -> Container:
        """Load both descriptors and register every service.

        Returns:
            Container: Newly populated container.

        Raises:
            WireError: If a descriptor cannot be loaded.
            ContainerError: If a descriptor entry is rejected by the container.
        """

        services = load_services(self.services, attribute=self.services_attribute)
        config = complete_config(
            load_config(self.config, attribute=self.config_attribute),
            services,
        )

        container = Container()
        container.register(CONFIG_SERVICE, ValueService(config))
        for name, spec in services.items():
            container.register(name, spec)
            LOGGER.debug("Registered service %s", name)
        LOGGER.debug("Wired %d services", len(container))
        self.container = container
        return container


def complete_config(config: Mapping[str, Any], services: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``config`` holding an entry for every service.

    Args:
        config: Configuration keyed by service name.
        services: Services descriptor whose names must appear in the result.

    Returns:
        dict[str, Any]: Completed configuration; missing or ``None`` entries
        default to an empty mapping.
    """

    completed = dict(config)
    for name in services:
        if completed.get(name) is None:
            completed[name] = {}
    return completed


__all__ = [
    "CONFIG_SERVICE",
    "DEFAULT_CONFIG_ATTRIBUTE",
    "DEFAULT_SERVICES_ATTRIBUTE",
    "Wire",
    "complete_config",
]
