"""
Console Interface Module

Numbered menu loop driving the bank service from a terminal, plus the
composition root that wires repository, transaction logger and service.
"""

from decimal import Decimal
from typing import Callable, Optional

from .audit import ConsoleTransactionLogger
from .config import get_config
from .currency import Currency, format_amount, parse_amount
from .errors import BankingError
from .logging_config import get_logger, setup_logging
from .service import BankService, BankServiceInterface
from .storage import InMemoryAccountRepository


MENU = (
    "\nPlease select an option:",
    "1. Create new account",
    "2. Deposit",
    "3. Withdraw",
    "4. Transfer",
    "5. Check balance",
    "6. Exit",
    "7. List accounts",
)


class BankConsoleUI:
    """
    Interactive menu over a BankService

    Any fault raised by a menu operation is caught at the top of the loop
    and printed, then the loop carries on. End of input exits.
    Input and output functions are injectable for scripted use.
    """

    def __init__(
        self,
        bank_service: BankServiceInterface,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        currency: Currency = Currency.USD
    ):
        self.bank_service = bank_service
        self.input = input_func or input
        self.output = output_func or print
        self.currency = currency
        self.logger = get_logger("simple_bank.console")
        self._handlers = {
            "1": self.handle_create_account,
            "2": self.handle_deposit,
            "3": self.handle_withdrawal,
            "4": self.handle_transfer,
            "5": self.handle_check_balance,
            "7": self.handle_list_accounts,
        }

    def start(self) -> None:
        """Run the menu loop until the user exits or input ends"""
        running = True
        while running:
            try:
                self.display_menu()
                choice = self.input("").strip()

                if choice == "6":
                    running = False
                    self.output("Thank you for using our banking application!")
                elif choice in self._handlers:
                    self._handlers[choice]()
                else:
                    self.output("Invalid option. Please try again.")
            except (EOFError, KeyboardInterrupt):
                running = False
                self.output("\nGoodbye.")
            except BankingError as e:
                self.logger.debug("Operation failed: %s", e)
                self.output(f"Error: {e}")
            except Exception as e:
                self.logger.error("Unexpected error in console loop", exc_info=True)
                self.output(f"Error: {e}")

    def display_menu(self) -> None:
        for line in MENU:
            self.output(line)

    def _read_amount(self, prompt: str) -> Optional[Decimal]:
        """Prompt for an amount; None (after a message) when it does not parse"""
        raw = self.input(prompt)
        try:
            return parse_amount(raw)
        except ValueError:
            self.output("Invalid amount entered.")
            return None

    def handle_create_account(self) -> None:
        account_number = self.input("Enter account number: ").strip()
        owner_name = self.input("Enter account holder name: ").strip()
        initial_balance = self._read_amount("Enter initial balance: ")
        if initial_balance is None:
            return

        self.bank_service.create_account(account_number, owner_name, initial_balance)
        self.output(f"Account {account_number} created.")

    def handle_deposit(self) -> None:
        account_number = self.input("Enter account number: ").strip()
        amount = self._read_amount("Enter amount to deposit: ")
        if amount is None:
            return

        self.bank_service.deposit(account_number, amount)

    def handle_withdrawal(self) -> None:
        account_number = self.input("Enter account number: ").strip()
        amount = self._read_amount("Enter amount to withdraw: ")
        if amount is None:
            return

        if not self.bank_service.withdraw(account_number, amount):
            self.output("Withdrawal failed due to insufficient funds.")

    def handle_transfer(self) -> None:
        source = self.input("Enter source account number: ").strip()
        destination = self.input("Enter destination account number: ").strip()
        amount = self._read_amount("Enter amount to transfer: ")
        if amount is None:
            return

        if not self.bank_service.transfer(source, destination, amount):
            self.output("Transfer failed due to insufficient funds.")

    def handle_check_balance(self) -> None:
        account_number = self.input("Enter account number: ").strip()
        balance = self.bank_service.get_balance(account_number)
        self.output(f"Current balance: {format_amount(balance, self.currency)}")

    def handle_list_accounts(self) -> None:
        accounts = self.bank_service.list_accounts()
        if not accounts:
            self.output("No accounts.")
            return
        for snapshot in accounts:
            self.output(
                f"{snapshot.account_number} - {snapshot.owner_name}: "
                f"{format_amount(snapshot.balance, self.currency)}"
            )


def main() -> None:
    """Wire the collaborators together and start the console"""
    config = get_config()
    setup_logging(
        level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file
    )

    repository = InMemoryAccountRepository()
    transaction_logger = ConsoleTransactionLogger(
        currency=config.currency_enum,
        timestamp_format=config.timestamp_format
    )
    bank_service = BankService(repository, transaction_logger)

    BankConsoleUI(bank_service, currency=config.currency_enum).start()
