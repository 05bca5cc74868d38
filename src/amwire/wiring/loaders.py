# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Turn descriptor sources (paths, module names, mappings) into mappings."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from importlib import import_module
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import Any, Final, TypeAlias

from ..errors import WireError, WireErrorReason

PYTHON_SUFFIX: Final[str] = ".py"
TOML_SUFFIX: Final[str] = ".toml"
JSON_SUFFIX: Final[str] = ".json"
_MODULE_PREFIX: Final[str] = "amwire_descriptor_"

DescriptorSource: TypeAlias = str | os.PathLike[str] | Mapping[str, Any]

LOGGER = logging.getLogger(__name__)


def is_descriptor_source(value: object) -> bool:
    """Return whether ``value`` can be handed to the loaders below.

    Args:
        value: Candidate descriptor source.

    Returns:
        bool: ``True`` for strings, path-like objects and mappings.
    """

    return isinstance(value, (str, os.PathLike, Mapping))


def load_services(source: DescriptorSource, *, attribute: str) -> Mapping[str, Any]:
    """Return the services descriptor designated by ``source``.

    Args:
        source: Mapping, path to a Python file, or dotted module name.
        attribute: Module attribute holding the descriptor mapping.

    Returns:
        Mapping[str, Any]: Service specs keyed by service name.

    Raises:
        WireError: If the module cannot be imported or lacks a mapping
            under ``attribute``.
    """

    if isinstance(source, Mapping):
        return source
    try:
        module = _import_source(source)
    except (ImportError, OSError, SyntaxError) as exc:
        raise WireError(
            WireErrorReason.SERVICES_NOT_FOUND,
            "Invalid arg[services], could not find di module",
        ) from exc
    return _descriptor_attribute(module, attribute, kind="di")


def load_config(source: DescriptorSource | None, *, attribute: str) -> Mapping[str, Any]:
    """Return the configuration descriptor designated by ``source``.

    Args:
        source: ``None``, a mapping, a TOML/JSON/Python file path, or a
            dotted module name.
        attribute: Module attribute holding the configuration mapping.

    Returns:
        Mapping[str, Any]: Configuration keyed by service name.

    Raises:
        WireError: If the source cannot be read or does not hold a mapping.
    """

    if source is None:
        return {}
    if isinstance(source, Mapping):
        return source
    suffix = Path(source).suffix.lower()
    try:
        if suffix == TOML_SUFFIX:
            with Path(source).open("rb") as handle:
                return _ensure_mapping(tomllib.load(handle), kind="config")
        if suffix == JSON_SUFFIX:
            payload = json.loads(Path(source).read_text(encoding="utf-8"))
            return _ensure_mapping(payload, kind="config")
        module = _import_source(source)
    except (ImportError, OSError, SyntaxError, ValueError) as exc:
        raise WireError(
            WireErrorReason.CONFIG_NOT_FOUND,
            "Invalid arg[config], could not find config module",
        ) from exc
    return _descriptor_attribute(module, attribute, kind="config")


def _import_source(source: str | os.PathLike[str]) -> ModuleType:
    """Import ``source`` from a ``.py`` path or as a dotted module name."""

    text = os.fspath(source)
    if text.endswith(PYTHON_SUFFIX) or os.sep in text:
        return _import_file(Path(text))
    LOGGER.debug("Importing descriptor module %s", text)
    return import_module(text)


def _import_file(path: Path) -> ModuleType:
    resolved = path.expanduser().resolve()
    if not resolved.is_file():
        raise FileNotFoundError(resolved)
    spec = spec_from_file_location(f"{_MODULE_PREFIX}{resolved.stem}", resolved)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load descriptor from {resolved}")
    module = module_from_spec(spec)
    LOGGER.debug("Executing descriptor file %s", resolved)
    spec.loader.exec_module(module)
    return module


def _descriptor_attribute(module: ModuleType, attribute: str, *, kind: str) -> Mapping[str, Any]:
    if not hasattr(module, attribute):
        raise WireError(
            WireErrorReason.INVALID_DESCRIPTOR,
            f"Invalid {kind} module {module.__name__}, missing {attribute} mapping",
        )
    return _ensure_mapping(getattr(module, attribute), kind=kind)


def _ensure_mapping(payload: object, *, kind: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise WireError(
            WireErrorReason.INVALID_DESCRIPTOR,
            f"Invalid {kind} descriptor, expected a mapping of service names",
        )
    return payload


__all__ = [
    "JSON_SUFFIX",
    "PYTHON_SUFFIX",
    "TOML_SUFFIX",
    "DescriptorSource",
    "is_descriptor_source",
    "load_config",
    "load_services",
]
