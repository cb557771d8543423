from typing import Callable, Optional, TypeVar

from rich.console import Console
from rich.markup import escape

from financial_tracker.display import build_ledger_table, build_no_results_panel
from financial_tracker.filters import SearchCriteria
from financial_tracker.repositories.base import LedgerWriteError
from financial_tracker.services.ledger_service import LedgerService
from financial_tracker.services.models import LedgerView, ParseResult
from financial_tracker.services.validation import (
    is_exit_command,
    parse_amount_input,
    parse_date_input,
    parse_text_input,
    parse_time_input,
)

T = TypeVar("T")

HOME_MENU = (
    "\n[bold cyan]Home[/bold cyan]\n"
    "Choose an option:\n"
    "  D) Add Deposit\n"
    "  P) Make Payment (Debit)\n"
    "  L) Ledger\n"
    "  X) Exit"
)

LEDGER_MENU = (
    "\n[bold cyan]Ledger[/bold cyan]\n"
    "Choose an option:\n"
    "  A) All\n"
    "  D) Deposits\n"
    "  P) Payments\n"
    "  R) Reports\n"
    "  H) Home"
)

REPORTS_MENU = (
    "\n[bold cyan]Reports[/bold cyan]\n"
    "Choose an option:\n"
    "  1) Month To Date\n"
    "  2) Previous Month\n"
    "  3) Year To Date\n"
    "  4) Previous Year\n"
    "  5) Search by Vendor\n"
    "  6) Custom Search\n"
    "  0) Back"
)

class LedgerShell:
    """
    Interactive menu loops over a LedgerService.

    All console I/O lives here. Input is read through `prompt` (the
    console's input by default) so the loops can be driven by a script.
    """

    def __init__(
        self,
        service: LedgerService,
        console: Optional[Console] = None,
        prompt: Optional[Callable[[str], str]] = None,
    ):
        self.service = service
        self.console = console or Console()
        self._prompt = prompt or self.console.input

    def run(self) -> None:
        """Home menu loop, returns when the user exits"""
        self.console.print("[bold]Welcome to Financial Tracker[/bold]")
        try:
            while True:
                self.console.print(HOME_MENU)
                choice = self.ask("> ").upper()

                if choice == "D":
                    self.add_transaction(payment=False)
                elif choice == "P":
                    self.add_transaction(payment=True)
                elif choice == "L":
                    self.ledger_menu()
                elif choice == "X":
                    break
                else:
                    self.console.print("[red]Invalid option[/red]")
        except EOFError:
            pass

        self.console.print("Goodbye!")

    def ledger_menu(self) -> None:
        while True:
            self.console.print(LEDGER_MENU)
            choice = self.ask("> ").upper()

            if choice == "A":
                self.show(self.service.all_entries())
            elif choice == "D":
                self.show(self.service.deposits())
            elif choice == "P":
                self.show(self.service.payments())
            elif choice == "R":
                self.reports_menu()
            elif choice == "H":
                return
            else:
                self.console.print("[red]Invalid option[/red]")

    def reports_menu(self) -> None:
        while True:
            self.console.print(REPORTS_MENU)
            choice = self.ask("> ")

            if choice == "1":
                self.show(self.service.month_to_date())
            elif choice == "2":
                self.show(self.service.previous_month())
            elif choice == "3":
                self.show(self.service.year_to_date())
            elif choice == "4":
                self.show(self.service.previous_year())
            elif choice == "5":
                vendor = self.ask("Enter the vendor name to search: ")
                self.show(self.service.search_vendor(vendor))
            elif choice == "6":
                self.show(self.service.custom_search(self.read_search_criteria()))
            elif choice == "0":
                return
            else:
                self.console.print("[red]Invalid option[/red]")

    def add_transaction(self, payment: bool) -> None:
        """
        Prompt for a new deposit or payment and record it.

        Typing 'exit' at the date or time prompt returns home without
        recording anything.
        """
        verbiage = "Payment" if payment else "Deposit"
        self.console.print(f"\n[bold cyan]Add {verbiage}[/bold cyan]\nType 'exit' to return home\n")

        txn_date = self.ask_until_valid(
            "Enter transaction date (yyyy-MM-dd): ", parse_date_input, allow_exit=True
        )
        if txn_date is None:
            return

        txn_time = self.ask_until_valid(
            "Enter transaction time (HH:mm:ss): ", parse_time_input, allow_exit=True
        )
        if txn_time is None:
            return

        description = self.ask_until_valid("Enter transaction description: ", parse_text_input)
        vendor = self.ask_until_valid("Enter vendor: ", parse_text_input)
        amount = self.ask_until_valid("Enter transaction amount: ", parse_amount_input)

        add = self.service.add_payment if payment else self.service.add_deposit
        try:
            add(txn_date, txn_time, description, vendor, amount)
        except LedgerWriteError as e:
            self.console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            return

        self.console.print(f"[green]✓ {verbiage} added successfully[/green]")

    def read_search_criteria(self) -> SearchCriteria:
        """Prompt for each custom search criterion; blank input skips it"""
        self.console.print(
            "\nTo filter on a value, answer the corresponding prompt.\n"
            "To ignore a filter, press 'Enter'."
        )

        start_date = self.ask_until_valid(
            "Start date, oldest (yyyy-MM-dd): ", parse_date_input, allow_blank=True
        )
        end_date = self.ask_until_valid(
            "End date, newest (yyyy-MM-dd): ", parse_date_input, allow_blank=True
        )
        description = self.ask("Description text: ") or None
        vendor = self.ask("Vendor text: ") or None
        min_amount = self.ask_until_valid(
            "Minimum amount: ",
            lambda text: parse_amount_input(text, positive_only=False),
            allow_blank=True,
        )
        max_amount = self.ask_until_valid(
            "Maximum amount: ",
            lambda text: parse_amount_input(text, positive_only=False),
            allow_blank=True,
        )

        return SearchCriteria(
            start_date=start_date,
            end_date=end_date,
            description=description,
            vendor=vendor,
            min_amount=min_amount,
            max_amount=max_amount,
        )

    def show(self, view: LedgerView) -> None:
        if view.is_empty:
            self.console.print(build_no_results_panel(view))
        else:
            self.console.print(build_ledger_table(view))

    def ask(self, text: str) -> str:
        return self._prompt(text).strip()

    def ask_until_valid(
        self,
        text: str,
        parse: Callable[[str], ParseResult[T]],
        allow_exit: bool = False,
        allow_blank: bool = False,
    ) -> Optional[T]:
        """
        Re-prompt until `parse` accepts the input.

        Returns None when the user exits (allow_exit) or leaves the
        answer blank (allow_blank).
        """
        while True:
            raw = self.ask(text)
            if allow_blank and not raw:
                return None
            if allow_exit and is_exit_command(raw):
                return None

            result = parse(raw)
            if result.ok:
                return result.value

            self.console.print(f"[red]{result.error}[/red]")
