"""Console presentation of wpcli-tools errors."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .exceptions import WpCliToolsError

LOGGER = logging.getLogger("wpcli_tools.handler")


class ExceptionHandler(Protocol):
    """Anything that can present an exception to the user."""

    def handle(self, exc: BaseException) -> None:
        ...


class DefaultExceptionHandler:
    """Render errors on a :class:`rich.console.Console`.

    A :class:`~wpcli_tools.exceptions.WpCliToolsError` is shown with its code,
    a context table and the suggested solutions. Any other exception is shown
    by message only. Rendering problems are logged, never raised.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def handle(self, exc: BaseException) -> None:
        try:
            if isinstance(exc, WpCliToolsError):
                self._render_tools_error(exc)
            else:
                self.console.print(f"[bold red]✗ Error:[/bold red] {escape(str(exc))}")
        except Exception:  # noqa: BLE001
            LOGGER.exception("Failed to render %s", type(exc).__name__)

    def _render_tools_error(self, exc: WpCliToolsError) -> None:
        self.console.print(
            f"[bold red]✗ Error [{exc.code}]:[/bold red] {escape(exc.message)}"
        )

        if exc.context:
            table = Table(title="Context", show_header=False)
            table.add_column("Key", style="cyan")
            table.add_column("Value")
            for key, value in exc.context.items():
                table.add_row(escape(str(key)), escape(str(value)))
            self.console.print(table)

        if exc.solutions:
            self.console.print("\n[bold]Suggested solutions:[/bold]")
            for solution in exc.solutions:
                self.console.print(f"  • {escape(solution)}")


__all__ = ["DefaultExceptionHandler", "ExceptionHandler"]
