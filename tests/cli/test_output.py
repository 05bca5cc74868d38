# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from rich.console import Console

from amwire import Container, FactoryService, ValueService
from amwire.cli._output import Reporter, console_for, services_table


def _render(table) -> str:
    console = Console(width=120, no_color=True, record=True)
    console.print(table)
    return console.export_text()


def test_services_table_rows_follow_registration_order() -> None:
    container = Container()
    container.register("secret", ValueService("s3cr3t", tags=["grp"]))
    container.register("greeting", FactoryService(lambda secret: secret, tags=["main", "grp"]))
    container.register("both", {"dependency": 1, "factory": lambda: 2})

    table = services_table(container)
    rendered = _render(table)

    assert table.row_count == 3
    assert rendered.index("secret") < rendered.index("greeting") < rendered.index("both")
    assert "factory" in rendered
    assert "grp, main" in rendered


def test_services_table_does_not_resolve_factories() -> None:
    calls: list[int] = []
    container = Container()
    container.register("lazy", {"factory": lambda: calls.append(1)})

    services_table(container)

    assert calls == []


def test_console_cached_per_preference() -> None:
    assert console_for(True, False) is console_for(True, False)
    assert console_for(True, False) is not console_for(False, False)


def test_reporter_omits_emoji_when_disabled(capsys) -> None:
    container = Container()
    container.register("only", ValueService(1))

    Reporter(use_color=False, use_emoji=False).wired("di.py", container)
    Reporter(use_color=False, use_emoji=True).warning("careful")

    out = capsys.readouterr().out
    assert "1 services registered from di.py" in out
    assert "✅" not in out
    assert "⚠" in out
