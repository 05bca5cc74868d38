# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Derive injectable dependency names from factory signatures."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

_POSITIONAL_KINDS: Final[frozenset[Any]] = frozenset(
    {inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD},
)


@dataclass(frozen=True, slots=True)
class FactorySignature:
    """Describe the services a factory expects to receive.

    Attributes:
        positional: Service names passed positionally, in declaration order.
        keyword: Service names passed by keyword (keyword-only parameters).
    """

    positional: tuple[str, ...] = ()
    keyword: tuple[str, ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        """Return every dependency name in resolution order.

        Returns:
            tuple[str, ...]: Positional names followed by keyword names.
        """

        return self.positional + self.keyword

    @classmethod
    def explicit(cls, names: tuple[str, ...]) -> FactorySignature:
        """Return a signature injecting ``names`` positionally.

        Args:
            names: Ordered dependency names declared alongside the factory.

        Returns:
            FactorySignature: Signature with only positional dependencies.
        """

        return cls(positional=names)


def inspect_factory(factory: Callable[..., Any]) -> FactorySignature:
    """Return the dependency names declared by ``factory``'s parameters.

    Variadic parameters are ignored. Callables whose signature cannot be
    retrieved (some builtins and extension types) declare no dependencies.

    Args:
        factory: Callable registered with the container.

    Returns:
        FactorySignature: Positional and keyword-only dependency names.
    """

    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        return FactorySignature()

    positional: list[str] = []
    keyword: list[str] = []
    for parameter in signature.parameters.values():
        if parameter.kind in _POSITIONAL_KINDS:
            positional.append(parameter.name)
        elif parameter.kind is inspect.Parameter.KEYWORD_ONLY:
            keyword.append(parameter.name)
    return FactorySignature(positional=tuple(positional), keyword=tuple(keyword))


__all__ = ["FactorySignature", "inspect_factory"]
