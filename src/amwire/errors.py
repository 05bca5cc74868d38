# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised by the container and the wiring helpers."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, Final

CONTAINER_COMPONENT: Final[str] = "container"
WIRE_COMPONENT: Final[str] = "wire"


class ContainerErrorReason(StrEnum):
    """Enumerate the failure conditions reported by :class:`Container`."""

    NAME_REQUIRED = "name_required"
    ALREADY_REGISTERED = "already_registered"
    SERVICE_REQUIRED = "service_required"
    INVALID_SERVICE_SPEC = "invalid_service_spec"
    INVALID_FACTORY = "invalid_factory"
    INVALID_TAGS = "invalid_tags"
    SERVICE_NOT_FOUND = "service_not_found"
    TAG_NOT_FOUND = "tag_not_found"


class WireErrorReason(StrEnum):
    """Enumerate the failure conditions reported by :class:`Wire`."""

    SERVICES_REQUIRED = "services_required"
    INVALID_SERVICES = "invalid_services"
    INVALID_CONFIG = "invalid_config"
    SERVICES_NOT_FOUND = "services_not_found"
    CONFIG_NOT_FOUND = "config_not_found"
    INVALID_DESCRIPTOR = "invalid_descriptor"


class ServiceError(RuntimeError):
    """Base error carrying a message and the component that raised it."""

    component: ClassVar[str] = "service"

    def __init__(self, message: str) -> None:
        """Create the error with a human-readable ``message``.

        Args:
            message: Description of the violated precondition.
        """

        super().__init__(message)
        self.message = message


class ContainerError(ServiceError):
    """Raised when registering or resolving a container service fails."""

    component: ClassVar[str] = CONTAINER_COMPONENT

    def __init__(self, reason: ContainerErrorReason, message: str) -> None:
        """Create the error for ``reason``.

        Args:
            reason: Discriminator naming the failed precondition.
            message: Description of the failure.
        """

        super().__init__(message)
        self.reason = reason


class WireError(ServiceError):
    """Raised when loading or reconciling wiring descriptors fails."""

    component: ClassVar[str] = WIRE_COMPONENT

    def __init__(self, reason: WireErrorReason, message: str) -> None:
        """Create the error for ``reason``.

        Args:
            reason: Discriminator naming the failed precondition.
            message: Description of the failure.
        """

        super().__init__(message)
        self.reason = reason


__all__ = (
    "CONTAINER_COMPONENT",
    "WIRE_COMPONENT",
    "ContainerError",
    "ContainerErrorReason",
    "ServiceError",
    "WireError",
    "WireErrorReason",
)
