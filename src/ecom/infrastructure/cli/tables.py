"""Plain-text rendering of a DataTable."""

from __future__ import annotations

import click

from ecom.application.data_table import DataTable


def render_table(table: DataTable, empty_message: str = "No results.") -> None:
    rows = [table.cells(row) for row in table.rows]
    if not rows:
        click.echo(empty_message)
        return

    headers = table.headers
    widths = [
        max(len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(headers)
    ]
    click.echo("  ".join(header.ljust(width) for header, width in zip(headers, widths)))
    click.echo("-" * (sum(widths) + 2 * (len(widths) - 1)))
    for row in rows:
        click.echo("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))

    if table.page_count > 1:
        click.echo(f"\nPage {table.page_index + 1} of {table.page_count}")
