from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table as RichTable

from ...domain.entities.table import ElementaryType

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from ...domain.entities.table import Table

_TYPE_STYLES = {
    ElementaryType.NUMERIC: "cyan",
    ElementaryType.TEXT: "magenta",
}


class TablePresenter:
    """Renders ingested tables to a rich console."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def present_columns(self, table: Table, source: Path) -> None:
        summary = RichTable(title=f"Columns of {source.name}")
        summary.add_column("#", justify="right", style="dim")
        summary.add_column("Name")
        summary.add_column("Type")
        for index, (name, column_type) in enumerate(
            zip(table.column_names, self._types(table), strict=True)
        ):
            summary.add_row(str(index), escape(name), self._styled(column_type))
        self.console.print(summary)
        self.console.print(
            f"[bold]{table.row_count:,} rows x {table.column_count} columns[/bold]"
        )

    def present_rows(
        self, columns: list[list[float] | list[str]], table: Table, limit: int
    ) -> None:
        if not table.rows:
            self.console.print("[dim]No data rows[/dim]")
            return
        preview = RichTable(title=f"First {min(limit, table.row_count)} rows")
        for name, column_type in zip(
            table.column_names, table.column_types, strict=True
        ):
            justify = "right" if column_type is ElementaryType.NUMERIC else "left"
            preview.add_column(escape(name), justify=justify)
        for row_index in range(min(limit, table.row_count)):
            preview.add_row(*(escape(str(column[row_index])) for column in columns))
        self.console.print(preview)

    @staticmethod
    def _types(table: Table) -> list[ElementaryType | None]:
        # A header-only table has names but no reconciled types.
        if table.column_types:
            return list(table.column_types)
        return [None] * table.column_count

    @staticmethod
    def _styled(column_type: ElementaryType | None) -> str:
        if column_type is None:
            return "[dim]-[/dim]"
        style = _TYPE_STYLES[column_type]
        return f"[{style}]{column_type.value}[/{style}]"
