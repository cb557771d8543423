import typer
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from financial_tracker.config.settings import LedgerConfig
from financial_tracker.logging_setup import configure_logging, get_logger
from financial_tracker.repositories.base import LedgerError
from financial_tracker.repositories.file_transaction_repository import FileTransactionRepository
from financial_tracker.services.ledger_service import LedgerService
from financial_tracker.shell import LedgerShell

app = typer.Typer(
    name="financial-tracker",
    help="Record deposits and payments and browse your ledger",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

@app.command()
def main(
    ledger: Optional[Path] = typer.Option(
        None,
        "--ledger", "-l",
        help="Ledger file (defaults to config / FINANCIAL_TRACKER_LEDGER)",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    ),
):
    """
    Financial Tracker - an interactive personal ledger.

    Examples:
        financial-tracker
        financial-tracker --ledger ~/finances/transactions.csv -v
    """
    config = LedgerConfig(ledger_path=ledger)
    configure_logging("DEBUG" if verbose else config.log_level)
    logger.debug("Starting with %r", config)

    service = LedgerService(FileTransactionRepository(config.ledger_path))

    try:
        count = service.load()
    except LedgerError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1)

    if service.repository.created:
        console.print(f"[yellow]Created new ledger file:[/yellow] {escape(str(config.ledger_path))}")

    if verbose:
        console.print(f"[dim]→ Loaded {count} transactions from {config.ledger_path}[/dim]")

    LedgerShell(service, console=console).run()


def cli_main():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    cli_main()
