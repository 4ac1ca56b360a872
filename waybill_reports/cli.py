"""Command-line entrypoints for rendering and exporting waybill reports."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .aggregator import build_aggregate
from .invoices import build_invoice_rows
from .reports import OrderLoadError, ReportKind, export_csv, load_orders
from .schemas import CarrierCategory, OrderData
from .settings import get_settings
from .utils import format_number
from .waybill import build_waybill_rows

app = typer.Typer(add_completion=False, help="Waybill report CLI")
console = Console()

CARRIER_STYLES = {
    CarrierCategory.SPX: "dark_orange",
    CarrierCategory.JNT: "red",
    CarrierCategory.FLASH: "yellow",
    CarrierCategory.LEX: "blue",
    CarrierCategory.NINJA: "deep_pink3",
    CarrierCategory.KERRY: "gold3",
    CarrierCategory.UNKNOWN: "grey50",
}

InputOption = typer.Option(..., "--input", "-i", exists=True, dir_okay=False, help="JSON file with extracted orders")
CsvOption = typer.Option(False, "--csv/--no-csv", help="Also write the report as CSV")
OutDirOption = typer.Option(None, "--out-dir", file_okay=False, help="Folder for CSV output (defaults to WAYBILL_REPORT_DIR)")


@app.callback()
def _configure(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(message)s", handlers=[RichHandler(console=console, show_path=False)], force=True)


def _load(input: Path) -> List[OrderData]:
    try:
        return load_orders(input)
    except OrderLoadError as exc:
        print(f"[red]Could not read orders:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)


def _maybe_export(kind: ReportKind, orders: List[OrderData], write_csv: bool, out_dir: Optional[Path]) -> None:
    if not write_csv:
        return
    path = export_csv(kind, orders, out_dir or get_settings().report_dir)
    print(f"CSV written to {path}")


def _no_data(message: str) -> None:
    print(f"[yellow]{message}[/yellow]")


@app.command()
def waybill(input: Path = InputOption, write_csv: bool = CsvOption, out_dir: Optional[Path] = OutDirOption) -> None:
    """Show one shipping-label row per order."""
    orders = _load(input)
    rows = build_waybill_rows(orders)
    if rows:
        table = Table(title=f"Waybill Data Report ({len(rows)} {'Order' if len(rows) == 1 else 'Orders'})")
        for column in ("#", "Order ID", "Customer Name (To)", "Courier Service", "Status"):
            table.add_column(column)
        for row in rows:
            table.add_row(
                str(row.line_no),
                escape(row.order_id),
                escape(row.customer_name),
                f"[{CARRIER_STYLES[row.carrier_category]}]{escape(row.carrier)}[/]",
                f"[green]{row.status}[/green]",
            )
        console.print(table)
    else:
        _no_data("No orders found or processed.")
    _maybe_export(ReportKind.WAYBILL, orders, write_csv, out_dir)


@app.command()
def aggregate(input: Path = InputOption, write_csv: bool = CsvOption, out_dir: Optional[Path] = OutDirOption) -> None:
    """Consolidate orders by customer and total quantities per product."""
    orders = _load(input)
    report = build_aggregate(orders)
    if report.is_empty:
        _no_data("No data found or processed.")
    else:
        table = Table(title="Order Aggregate System")
        for column in ("Name", "Order ID", "Product Name", "Variation", "QTY"):
            table.add_column(column)
        for row in report.rows:
            first = row.is_first_row_for_customer
            table.add_row(
                f"[bold]{escape(row.name)}[/bold]" if first else "",
                escape(row.order_ids) if first else "",
                escape(row.product_name),
                escape(row.variation),
                row.qty_display,
            )
        console.print(table)

    if report.summary:
        summary = Table(title="Final Product Release Summary")
        for column in ("Product Name", "Variation", "Final Release Qty"):
            summary.add_column(column)
        for product in report.summary:
            summary.add_row(escape(product.name), escape(product.variation), format_number(product.total_qty))
        console.print(summary)
    else:
        _no_data("No product items to summarize.")
    _maybe_export(ReportKind.AGGREGATE, orders, write_csv, out_dir)


@app.command()
def invoice(input: Path = InputOption, write_csv: bool = CsvOption, out_dir: Optional[Path] = OutDirOption) -> None:
    """List every order item with its VAT split."""
    orders = _load(input)
    rows = build_invoice_rows(orders)
    if rows:
        table = Table(title="Customer Invoicing List")
        columns = ("Customer Name", "Order ID", "Product Name", "Variation", "Qty", "Unit Price", "Total Price", "Net VAT", "VAT")
        for column in columns:
            table.add_column(column, justify="right" if column in columns[4:] else "left")
        for row in rows:
            table.add_row(*(escape(cell) for cell in row.display().values()))
        console.print(table)
    else:
        _no_data("No invoice data available.")
    _maybe_export(ReportKind.INVOICE, orders, write_csv, out_dir)


@app.command("export-all")
def export_all(input: Path = InputOption, out_dir: Optional[Path] = OutDirOption) -> None:
    """Write all three CSV reports."""
    orders = _load(input)
    target = out_dir or get_settings().report_dir
    for kind in ReportKind:
        path = export_csv(kind, orders, target)
        print(f"{kind.value}: {path}")


def main():
    app()


if __name__ == "__main__":
    main()
