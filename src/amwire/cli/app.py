# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point for wiring and inspecting service descriptors."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core.container import Container
from ..errors import ServiceError
from ..settings import SettingsError
from ..wiring.wire import Wire
from ._options import (
    CONFIG_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    ROOT_OPTION,
    SERVICES_ARGUMENT,
    WireCLIOptions,
    build_wire_options,
)
from ._output import Reporter

app = typer.Typer(help="Wire service descriptors into a dependency injection container.", no_args_is_help=True)


def _load_options(
    services: str | None,
    config: str | None,
    root: Path,
    *,
    no_color: bool,
    no_emoji: bool,
) -> tuple[WireCLIOptions, Reporter]:
    """Return the merged options and a reporter honouring ``[tool.amwire]``.

    Errors raised before settings are known are reported with the flag values.
    """

    try:
        options = build_wire_options(services, config, root, no_color=no_color, no_emoji=no_emoji)
    except SettingsError as exc:
        Reporter(use_color=not no_color, use_emoji=not no_emoji).failure(exc)
        raise typer.Exit(code=1) from exc
    reporter = Reporter(use_color=options.settings.use_color, use_emoji=options.settings.use_emoji)
    return options, reporter


def _connect(options: WireCLIOptions) -> Container:
    wire = Wire(
        options.services,
        options.config,
        services_attribute=options.settings.services_attribute,
        config_attribute=options.settings.config_attribute,
    )
    return wire.connect()


@app.command("run")
def run_command(
    services: SERVICES_ARGUMENT = None,
    config: CONFIG_OPTION = None,
    root: ROOT_OPTION = Path("."),
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
) -> None:
    """Wire SERVICES and run the service tagged ``main``."""

    options, reporter = _load_options(services, config, root, no_color=no_color, no_emoji=no_emoji)
    try:
        main_service = _connect(options).get_main_service()
    except ServiceError as exc:
        reporter.failure(exc)
        raise typer.Exit(code=1) from exc

    if callable(main_service):
        result = main_service()
    else:
        reporter.warning("Main service is not callable; printing its value")
        result = main_service
    if result is not None:
        typer.echo(result)


@app.command("inspect")
def inspect_command(
    services: SERVICES_ARGUMENT = None,
    config: CONFIG_OPTION = None,
    root: ROOT_OPTION = Path("."),
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
) -> None:
    """Wire SERVICES and list every registered service without resolving it."""

    options, reporter = _load_options(services, config, root, no_color=no_color, no_emoji=no_emoji)
    try:
        container = _connect(options)
    except ServiceError as exc:
        reporter.failure(exc)
        raise typer.Exit(code=1) from exc

    reporter.services(container)
    reporter.wired(options.services, container)


def main() -> None:
    """Invoke the Typer application."""

    app()


__all__ = ["app", "main"]
