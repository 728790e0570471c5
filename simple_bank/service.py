"""
Bank Service Module

Turns account-number-addressed use cases (create, deposit, withdraw,
transfer, balance query) into repository lookups and account operations,
and records every successful mutation with the transaction logger.

Validation and not-found faults propagate to the caller. Insufficient funds
is an expected business outcome and is returned as False, with nothing
logged.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, List

from .accounts import Account, AccountSnapshot
from .audit import TransactionLoggerInterface, TransactionType
from .currency import to_decimal
from .logging_config import get_logger, log_action
from .storage import AccountRepositoryInterface


class BankServiceInterface(ABC):
    """Banking use cases exposed to the console"""

    @abstractmethod
    def create_account(self, account_number: str, owner_name: str,
                       initial_balance: Any = Decimal('0')) -> AccountSnapshot:
        pass

    @abstractmethod
    def deposit(self, account_number: str, amount: Any) -> None:
        pass

    @abstractmethod
    def withdraw(self, account_number: str, amount: Any) -> bool:
        pass

    @abstractmethod
    def transfer(self, source_account_number: str,
                 destination_account_number: str, amount: Any) -> bool:
        pass

    @abstractmethod
    def get_balance(self, account_number: str) -> Decimal:
        pass

    @abstractmethod
    def list_accounts(self) -> List[AccountSnapshot]:
        pass


class BankService(BankServiceInterface):
    """
    Orchestrates account operations

    Collaborators are injected by the caller; the service never builds
    its own repository or logger.
    """

    def __init__(
        self,
        repository: AccountRepositoryInterface,
        transaction_logger: TransactionLoggerInterface
    ):
        self.repository = repository
        self.transaction_logger = transaction_logger
        self.logger = get_logger("simple_bank.service")

    def create_account(
        self,
        account_number: str,
        owner_name: str,
        initial_balance: Any = Decimal('0')
    ) -> AccountSnapshot:
        """
        Open a new account

        Args:
            account_number: Unique account number
            owner_name: Name of the account holder
            initial_balance: Non-negative opening balance

        Returns:
            Snapshot of the created account

        Raises:
            ValidationError: If any argument is invalid
            DuplicateKeyError: If the account number is already taken
        """
        account = Account(account_number, owner_name, initial_balance)
        self.repository.add_account(account)

        self.transaction_logger.log_transaction(
            TransactionType.ACCOUNT_CREATION, account_number, account.get_balance()
        )
        log_action(
            self.logger, "info", "Account created",
            action="create_account", resource=f"account:{account_number}",
            extra={"owner_name": owner_name, "initial_balance": str(account.get_balance())}
        )
        return account.snapshot()

    def deposit(self, account_number: str, amount: Any) -> None:
        """
        Deposit into an account

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If amount is not positive
        """
        account = self.repository.get_account(account_number)
        value = to_decimal(amount, "Deposit amount")
        account.deposit(value)

        self.transaction_logger.log_transaction(
            TransactionType.DEPOSIT, account_number, value
        )
        log_action(
            self.logger, "info", "Deposit completed",
            action="deposit", resource=f"account:{account_number}",
            extra={"amount": str(value)}
        )

    def withdraw(self, account_number: str, amount: Any) -> bool:
        """
        Withdraw from an account

        Returns:
            True on success, False on insufficient funds (nothing logged)

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If amount is not positive
        """
        account = self.repository.get_account(account_number)
        value = to_decimal(amount, "Withdrawal amount")

        if not account.withdraw(value):
            log_action(
                self.logger, "info", "Withdrawal rejected: insufficient funds",
                action="withdraw", resource=f"account:{account_number}",
                extra={"amount": str(value)}
            )
            return False

        self.transaction_logger.log_transaction(
            TransactionType.WITHDRAWAL, account_number, value.copy_negate()
        )
        log_action(
            self.logger, "info", "Withdrawal completed",
            action="withdraw", resource=f"account:{account_number}",
            extra={"amount": str(value)}
        )
        return True

    def transfer(
        self,
        source_account_number: str,
        destination_account_number: str,
        amount: Any
    ) -> bool:
        """
        Transfer between two accounts

        Both log entries are written only after the transfer has moved
        both balances.

        Returns:
            True on success, False on insufficient funds (nothing logged)

        Raises:
            NotFoundError: If either account does not exist
            ValidationError: If amount is not positive
        """
        source = self.repository.get_account(source_account_number)
        destination = self.repository.get_account(destination_account_number)
        value = to_decimal(amount, "Transfer amount")

        if not source.transfer(destination, value):
            log_action(
                self.logger, "info", "Transfer rejected: insufficient funds",
                action="transfer", resource=f"account:{source_account_number}",
                extra={"to": destination_account_number, "amount": str(value)}
            )
            return False

        self.transaction_logger.log_transaction(
            TransactionType.TRANSFER_OUT, source_account_number, value.copy_negate()
        )
        self.transaction_logger.log_transaction(
            TransactionType.TRANSFER_IN, destination_account_number, value
        )
        log_action(
            self.logger, "info", "Transfer completed",
            action="transfer", resource=f"account:{source_account_number}",
            extra={"to": destination_account_number, "amount": str(value)}
        )
        return True

    def get_balance(self, account_number: str) -> Decimal:
        """Get current balance; raises NotFoundError for unknown accounts"""
        return self.repository.get_account(account_number).get_balance()

    def list_accounts(self) -> List[AccountSnapshot]:
        """Get read-only snapshots of all accounts"""
        return [account.snapshot() for account in self.repository.list_accounts()]
