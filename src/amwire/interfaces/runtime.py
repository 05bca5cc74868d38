# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interfaces describing service registration and resolution."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeAlias, runtime_checkable

ServiceFactory: TypeAlias = Callable[..., Any]


@runtime_checkable
class ServiceProvider(Protocol):
    """Expose zero-argument call semantics for lazily resolved services."""

    @abstractmethod
    def __call__(self) -> Any:
        """Return the resolved service instance.

        Returns:
            Any: Service retrieved from the container.
        """

        raise NotImplementedError


@runtime_checkable
class ServiceRegistryProtocol(Protocol):
    """Describe the behaviour required from service registries."""

    @abstractmethod
    def register(self, name: str, spec: object) -> None:
        """Register the service described by ``spec`` under ``name``.

        Args:
            name: Unique service identifier.
            spec: Service definition, either a typed variant or a mapping.
        """
        raise NotImplementedError("ServiceRegistryProtocol.register must be implemented")

    @abstractmethod
    def get_service(self, name: str) -> Any:
        """Return the service registered under ``name``.

        Args:
            name: Unique service identifier.

        Returns:
            Any: Resolved service value.
        """
        raise NotImplementedError("ServiceRegistryProtocol.get_service must be implemented")

    @abstractmethod
    def get_main_service(self) -> Any:
        """Return the first service tagged ``main``.

        Returns:
            Any: Resolved main service value.
        """
        raise NotImplementedError("ServiceRegistryProtocol.get_main_service must be implemented")

    @abstractmethod
    def get_tagged_services(self, tag: str) -> list[Any]:
        """Return every service registered under ``tag`` in registration order.

        Args:
            tag: Tag identifier.

        Returns:
            list[Any]: Resolved service values.
        """
        raise NotImplementedError("ServiceRegistryProtocol.get_tagged_services must be implemented")

    @property
    @abstractmethod
    def tags(self) -> Mapping[str, tuple[str, ...]]:
        """Return the read-only tag index.

        Returns:
            Mapping[str, tuple[str, ...]]: Service names keyed by tag.
        """
        raise NotImplementedError("ServiceRegistryProtocol.tags must be implemented")

    @abstractmethod
    def __contains__(self, name: object) -> bool:
        """Return whether ``name`` has a registered service.

        Args:
            name: Unique service identifier.

        Returns:
            bool: ``True`` when a value or factory is registered for ``name``.
        """
        raise NotImplementedError("ServiceRegistryProtocol.__contains__ must be implemented")

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of registered services.

        Returns:
            int: Count of distinct registered service names.
        """
        raise NotImplementedError("ServiceRegistryProtocol.__len__ must be implemented")


__all__ = [
    "ServiceFactory",
    "ServiceProvider",
    "ServiceRegistryProtocol",
]
