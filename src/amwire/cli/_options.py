# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parameter declarations for the amwire CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..settings import WireSettings, load_settings

SERVICES_ARGUMENT = Annotated[
    str | None,
    typer.Argument(
        metavar="[SERVICES]",
        help="Services descriptor: a .py file or a dotted module name.",
        show_default=False,
    ),
]
CONFIG_OPTION = Annotated[
    str | None,
    typer.Option("--config", "-c", help="Configuration descriptor (.py, .toml, .json or module).", show_default=False),
]
ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding pyproject.toml."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable coloured output."),
]
NO_EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--no-emoji", help="Disable emoji in output."),
]


@dataclass(slots=True)
class WireCLIOptions:
    """Normalised CLI inputs shared by the wiring commands."""

    root: Path
    services: str
    config: str | None
    settings: WireSettings


def build_wire_options(
    services: str | None,
    config: str | None,
    root: Path,
    *,
    no_color: bool,
    no_emoji: bool,
) -> WireCLIOptions:
    """Merge command-line values over ``[tool.amwire]`` settings.

    Args:
        services: Services descriptor given on the command line.
        config: Configuration descriptor given on the command line.
        root: Project root holding the optional ``pyproject.toml``.
        no_color: Disable coloured output when ``True``.
        no_emoji: Disable emoji output when ``True``.

    Returns:
        WireCLIOptions: Options with sources resolved against ``root``.

    Raises:
        typer.BadParameter: If no services descriptor is configured anywhere.
        SettingsError: If ``[tool.amwire]`` is invalid.
    """

    resolved_root = root.expanduser().resolve()
    settings = load_settings(resolved_root).with_overrides(
        services=services,
        config=config,
        use_color=False if no_color else None,
        use_emoji=False if no_emoji else None,
    )
    services_source = settings.resolve_source(settings.services, resolved_root)
    if services_source is None:
        raise typer.BadParameter("Provide a services descriptor or set services in [tool.amwire].")
    return WireCLIOptions(
        root=resolved_root,
        services=services_source,
        config=settings.resolve_source(settings.config, resolved_root),
        settings=settings,
    )


__all__ = [
    "CONFIG_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "ROOT_OPTION",
    "SERVICES_ARGUMENT",
    "WireCLIOptions",
    "build_wire_options",
]
