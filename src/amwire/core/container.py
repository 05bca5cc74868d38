# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Minimal dependency injection container with name-based injection."""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from types import MappingProxyType
from typing import Any, Final

from ..errors import ContainerError, ContainerErrorReason
from ..interfaces.runtime import ServiceFactory, ServiceProvider, ServiceRegistryProtocol
from .introspection import FactorySignature
from .specs import normalise_spec

MAIN_TAG: Final[str] = "main"


class Container(ServiceRegistryProtocol):
    """Registry of named services resolved lazily by parameter name.

    Services are registered either with a literal value or with a factory.
    A factory's parameters name the services it depends on; they are
    resolved recursively on first lookup and the factory result is cached,
    so every later lookup returns the same object.
    """

    def __init__(self) -> None:
        """Initialise an empty service registry."""

        self._factories: dict[str, ServiceFactory] = {}
        self._signatures: dict[str, FactorySignature] = {}
        self._dependencies: dict[str, Any] = {}
        self._tags: dict[str, list[str]] = {}
        self._names: list[str] = []

    def register(self, name: str, spec: object) -> None:
        """Register the service described by ``spec`` under ``name``.

        Args:
            name: Unique service identifier.
            spec: :class:`~amwire.core.specs.ValueService`,
                :class:`~amwire.core.specs.FactoryService` or a mapping with
                ``dependency``/``factory`` and optional ``tags`` keys.

        Raises:
            ContainerError: If ``name`` is missing or already registered, or
                ``spec`` is missing or malformed. The registry is left
                untouched on failure.
        """

        if not isinstance(name, str) or not name:
            raise ContainerError(
                ContainerErrorReason.NAME_REQUIRED,
                "Invalid DI container arg[name], Service must have name",
            )
        if name in self:
            raise ContainerError(
                ContainerErrorReason.ALREADY_REGISTERED,
                "Invalid DI container arg[name], Service already registered",
            )
        definition = normalise_spec(spec)

        self._names.append(name)
        if definition.has_value:
            self._dependencies[name] = definition.value
        if definition.factory is not None and definition.signature is not None:
            self._factories[name] = definition.factory
            self._signatures[name] = definition.signature
        for tag in definition.tags:
            self._tags.setdefault(tag, []).append(name)

    def get_service(self, name: str) -> Any:
        """Resolve the service registered under ``name``.

        Args:
            name: Unique service identifier.

        Returns:
            Any: Registered value, or the cached result of the service factory.

        Raises:
            ContainerError: If ``name`` is missing, or if the service or one of
                its transitive dependencies is not registered. The error names
                the service that is actually missing.
        """

        if not isinstance(name, str) or not name:
            raise ContainerError(
                ContainerErrorReason.NAME_REQUIRED,
                "Invalid DI container arg[name], Provide service name",
            )
        if name in self._dependencies:
            return self._dependencies[name]
        factory = self._factories.get(name)
        if factory is None:
            raise ContainerError(
                ContainerErrorReason.SERVICE_NOT_FOUND,
                f"Invalid DI container arg[name], Service {name} Not found",
            )
        self._dependencies[name] = self._inject(factory, self._signatures[name])
        return self._dependencies[name]

    def get_main_service(self) -> Any:
        """Return the first service tagged ``main``.

        Returns:
            Any: Resolved main service.

        Raises:
            ContainerError: If no service carries the ``main`` tag.
        """

        return self.get_tagged_services(MAIN_TAG)[0]

    def get_tagged_services(self, tag: str) -> list[Any]:
        """Resolve every service registered under ``tag``.

        Args:
            tag: Tag identifier.

        Returns:
            list[Any]: Resolved services in registration order.

        Raises:
            ContainerError: If no service was registered with ``tag``.
        """

        names = self._tags.get(tag)
        if names is None:
            raise ContainerError(
                ContainerErrorReason.TAG_NOT_FOUND,
                f"Invalid DI container arg[tag], Could not find services with tag {tag}",
            )
        return [self.get_service(service_name) for service_name in names]

    def provide(self, name: str) -> ServiceProvider:
        """Return a zero-argument provider that resolves ``name`` lazily.

        Args:
            name: Unique service identifier.

        Returns:
            ServiceProvider: Provider function that returns the service on demand.
        """

        return partial(self.get_service, name)

    def dependencies_of(self, name: str) -> tuple[str, ...]:
        """Return the service names ``name`` depends on.

        Args:
            name: Unique service identifier.

        Returns:
            tuple[str, ...]: Ordered dependency names; empty for value services.

        Raises:
            ContainerError: If ``name`` is not registered.
        """

        if name not in self:
            raise ContainerError(
                ContainerErrorReason.SERVICE_NOT_FOUND,
                f"Invalid DI container arg[name], Service {name} Not found",
            )
        signature = self._signatures.get(name)
        return signature.names if signature is not None else ()

    @property
    def names(self) -> tuple[str, ...]:
        """Return registered service names in registration order."""

        return tuple(self._names)

    @property
    def factories(self) -> Mapping[str, ServiceFactory]:
        """Return a read-only view of registered factories."""

        return MappingProxyType(self._factories)

    @property
    def dependencies(self) -> Mapping[str, Any]:
        """Return a read-only view of registered and resolved values."""

        return MappingProxyType(self._dependencies)

    @property
    def tags(self) -> Mapping[str, tuple[str, ...]]:
        """Return a snapshot of the tag index."""

        return MappingProxyType({tag: tuple(names) for tag, names in self._tags.items()})

    def __contains__(self, name: object) -> bool:
        """Return whether ``name`` corresponds to a registered service.

        Args:
            name: Unique service identifier.

        Returns:
            bool: ``True`` when a value or a factory is registered for ``name``.
        """

        return name in self._dependencies or name in self._factories

    def __len__(self) -> int:
        """Return the number of distinct registered service names.

        Returns:
            int: Count of registered services.
        """

        return len(self._names)

    def __repr__(self) -> str:
        """Return a developer-facing representation summarising registrations.

        Returns:
            str: Description containing known service names.
        """

        names = ", ".join(sorted(self._names))
        return f"Container(services=[{names}])"

    def _inject(self, factory: ServiceFactory, signature: FactorySignature) -> Any:
        args = [self.get_service(dependency) for dependency in signature.positional]
        kwargs = {dependency: self.get_service(dependency) for dependency in signature.keyword}
        return factory(*args, **kwargs)


__all__ = ["MAIN_TAG", "Container"]
