# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service definitions accepted by :class:`amwire.core.container.Container`.

Two typed variants describe a service: :class:`ValueService` wraps an eager
value and :class:`FactoryService` wraps a lazily invoked factory. Descriptor
modules may also use plain mappings with ``dependency``, ``factory`` and
``tags`` keys; :func:`normalise_spec` validates either form and folds it into a
:class:`ServiceDefinition` without touching any registry state.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final

from ..errors import ContainerError, ContainerErrorReason
from ..interfaces.runtime import ServiceFactory
from .introspection import FactorySignature, inspect_factory

DEPENDENCY_KEY: Final[str] = "dependency"
FACTORY_KEY: Final[str] = "factory"
TAGS_KEY: Final[str] = "tags"


class _Missing:
    """Marker type distinguishing "no value supplied" from ``None``."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class ValueService:
    """Service backed by a literal value."""

    value: Any
    tags: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class FactoryService:
    """Service backed by a factory resolved on first lookup.

    When ``dependencies`` is ``None`` the factory's parameter names are used
    as the dependency list; otherwise the listed services are passed
    positionally in the given order.
    """

    factory: ServiceFactory
    dependencies: Sequence[str] | None = None
    tags: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class ServiceDefinition:
    """Validated, normalised registration payload."""

    value: Any = MISSING
    factory: ServiceFactory | None = None
    signature: FactorySignature | None = None
    tags: tuple[str, ...] = ()

    @property
    def has_value(self) -> bool:
        """Return whether a literal value was supplied.

        Returns:
            bool: ``True`` when :attr:`value` holds a registered value.
        """

        return self.value is not MISSING


def normalise_spec(spec: object) -> ServiceDefinition:
    """Validate ``spec`` and return its :class:`ServiceDefinition`.

    Args:
        spec: Typed service variant or descriptor mapping.

    Returns:
        ServiceDefinition: Normalised definition ready for registration.

    Raises:
        ContainerError: If ``spec`` is missing or malformed.
    """

    if spec is None:
        raise ContainerError(
            ContainerErrorReason.SERVICE_REQUIRED,
            "Invalid DI container arg[service], Service must be provided",
        )
    if isinstance(spec, ValueService):
        return ServiceDefinition(value=spec.value, tags=_validate_tags(spec.tags))
    if isinstance(spec, FactoryService):
        factory = _validate_factory(spec.factory)
        if spec.dependencies is None:
            signature = inspect_factory(factory)
        else:
            signature = _explicit_signature(spec.dependencies)
        return ServiceDefinition(
            factory=factory,
            signature=signature,
            tags=_validate_tags(spec.tags),
        )
    if isinstance(spec, Mapping):
        return _normalise_mapping(spec)
    raise _invalid_spec()


def _normalise_mapping(spec: Mapping[str, Any]) -> ServiceDefinition:
    """Return the definition described by a descriptor mapping.

    ``dependency`` and ``factory`` are handled independently so a mapping
    supplying both registers both.
    """

    if DEPENDENCY_KEY not in spec and FACTORY_KEY not in spec:
        raise _invalid_spec()

    factory: ServiceFactory | None = None
    signature: FactorySignature | None = None
    if FACTORY_KEY in spec:
        factory = _validate_factory(spec[FACTORY_KEY])
        signature = inspect_factory(factory)
    tags = _validate_tags(spec[TAGS_KEY]) if TAGS_KEY in spec else ()
    return ServiceDefinition(
        value=spec.get(DEPENDENCY_KEY, MISSING),
        factory=factory,
        signature=signature,
        tags=tags,
    )


def _validate_factory(factory: object) -> ServiceFactory:
    if not callable(factory):
        raise ContainerError(
            ContainerErrorReason.INVALID_FACTORY,
            "Invalid DI container arg[factory], factory must be callable",
        )
    return factory


def _explicit_signature(dependencies: object) -> FactorySignature:
    if isinstance(dependencies, str) or not isinstance(dependencies, Sequence):
        raise _invalid_dependencies()
    names = tuple(dependencies)
    if not all(isinstance(name, str) and name for name in names):
        raise _invalid_dependencies()
    return FactorySignature.explicit(names)


def _validate_tags(tags: object) -> tuple[str, ...]:
    if not isinstance(tags, (list, tuple)) or not all(isinstance(tag, str) for tag in tags):
        raise ContainerError(
            ContainerErrorReason.INVALID_TAGS,
            "Invalid DI container arg[tags], tags must be an array",
        )
    return tuple(tags)


def _invalid_spec() -> ContainerError:
    return ContainerError(
        ContainerErrorReason.INVALID_SERVICE_SPEC,
        "Invalid DI container arg[service], Invalid service args",
    )


def _invalid_dependencies() -> ContainerError:
    return ContainerError(
        ContainerErrorReason.INVALID_FACTORY,
        "Invalid DI container arg[factory], dependencies must be a sequence of service names",
    )


__all__ = [
    "DEPENDENCY_KEY",
    "FACTORY_KEY",
    "MISSING",
    "TAGS_KEY",
    "FactoryService",
    "ServiceDefinition",
    "ValueService",
    "normalise_spec",
]
