from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from financial_tracker.parsers.pipe_record import DATE_FORMAT, TIME_FORMAT
from financial_tracker.services.models import LedgerView

TEXT_WIDTH = 40
NO_RESULTS_MESSAGE = "No results found matching criteria."

def truncate(text: str, width: int = TEXT_WIDTH) -> str:
    """Shorten text to width characters, ending in '...' when cut"""
    if len(text) <= width:
        return text
    return text[:width - 3] + "..."

def format_amount(amount: float) -> str:
    color = "red" if amount < 0 else "green"
    return f"[{color}]{amount:,.2f}[/{color}]"

def build_ledger_table(view: LedgerView) -> Table:
    """Render a ledger view as a table, one row per transaction, newest first"""
    table = Table(
        title=f"{escape(view.title)} ({view.count})",
        caption=(
            f"In: ${view.total_deposits:,.2f}   "
            f"Out: ${view.total_payments:,.2f}   "
            f"Net: ${view.net:,.2f}"
        ),
        row_styles=["", "dim"],
    )
    table.add_column("Date", style="cyan", width=10)
    table.add_column("Time", style="cyan", width=8)
    table.add_column("Description", style="white", max_width=TEXT_WIDTH)
    table.add_column("Vendor", style="magenta", max_width=TEXT_WIDTH)
    table.add_column("Amount", justify="right", width=12)

    for txn in view.transactions:
        table.add_row(
            txn.date.strftime(DATE_FORMAT),
            txn.time.strftime(TIME_FORMAT),
            escape(truncate(txn.description)),
            escape(truncate(txn.vendor)),
            format_amount(txn.amount),
        )

    return table

def build_no_results_panel(view: LedgerView) -> Panel:
    return Panel(
        f"[yellow]{NO_RESULTS_MESSAGE}[/yellow]",
        title=escape(view.title),
        border_style="yellow",
    )
