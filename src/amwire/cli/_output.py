# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for the wiring commands: status lines and the services table."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.container import Container

_NO_ENTRIES: Final[str] = "-"


@lru_cache(maxsize=4)
def console_for(use_color: bool, use_emoji: bool) -> Console:
    """Return the shared console for one colour/emoji combination.

    Args:
        use_color: Render styles when ``True``.
        use_emoji: Render emoji codes when ``True``.

    Returns:
        Console: Cached console writing to the current ``sys.stdout``.
    """

    return Console(no_color=not use_color, emoji=use_emoji, soft_wrap=True, highlight=False)


@dataclass(frozen=True, slots=True)
class Reporter:
    """Write wiring outcomes using the output preferences of one invocation."""

    use_color: bool = True
    use_emoji: bool = True

    @property
    def console(self) -> Console:
        return console_for(self.use_color, self.use_emoji)

    def failure(self, error: Exception) -> None:
        """Report a wiring or settings error that aborts the command."""

        self._line("❌ ", str(error), "red")

    def warning(self, message: str) -> None:
        self._line("⚠️ ", message, "yellow")

    def wired(self, source: str, container: Container) -> None:
        """Summarise a successful ``connect()`` of ``source``."""

        self._line("✅ ", f"{len(container)} services registered from {source}", "green")

    def services(self, container: Container) -> None:
        """Print every registered service without resolving any of them."""

        self.console.print(services_table(container))

    def _line(self, marker: str, message: str, style: str) -> None:
        text = Text(f"{marker if self.use_emoji else ''}{message}")
        if self.use_color:
            text.stylize(style)
        self.console.print(text)


def services_table(container: Container) -> Table:
    """Build a table of service name, kind, declared dependencies and tags.

    Args:
        container: Wired container to describe.

    Returns:
        Table: One row per service in registration order.
    """

    tags_by_service = _tags_by_service(container.tags)
    table = Table(title="Services")
    for column in ("Service", "Kind", "Dependencies", "Tags"):
        table.add_column(column)
    for name in container.names:
        table.add_row(
            name,
            _service_kind(container, name),
            ", ".join(container.dependencies_of(name)) or _NO_ENTRIES,
            ", ".join(tags_by_service.get(name, ())) or _NO_ENTRIES,
        )
    return table


def _service_kind(container: Container, name: str) -> str:
    has_factory = name in container.factories
    has_value = name in container.dependencies
    if has_factory and has_value:
        return "both"
    return "factory" if has_factory else "value"


def _tags_by_service(tags: Mapping[str, tuple[str, ...]]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for tag, names in tags.items():
        for name in names:
            grouped.setdefault(name, []).append(tag)
    return grouped


__all__ = ["Reporter", "console_for", "services_table"]
