"""
Account Storage Module

Provides the abstract account repository interface and the in-memory
implementation. Nothing is persisted; the repository lives and dies with
the process.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from .accounts import Account
from .errors import DuplicateKeyError, NotFoundError


class AccountRepositoryInterface(ABC):
    """Abstract interface for account repositories"""

    @abstractmethod
    def add_account(self, account: Account) -> None:
        """Store a new account"""
        pass

    @abstractmethod
    def get_account(self, account_number: str) -> Account:
        """Load an account by number"""
        pass

    @abstractmethod
    def account_exists(self, account_number: str) -> bool:
        """Check if an account exists"""
        pass

    @abstractmethod
    def list_accounts(self) -> List[Account]:
        """Load all accounts"""
        pass

    def count(self) -> int:
        """Count stored accounts"""
        return len(self.list_accounts())


class InMemoryAccountRepository(AccountRepositoryInterface):
    """
    In-memory repository keyed by account number.

    Returns live Account objects rather than copies, so a mutation made
    through one lookup is visible to every later lookup.
    """

    def __init__(self):
        self._accounts: Dict[str, Account] = {}

    def add_account(self, account: Account) -> None:
        """
        Store an account

        Raises:
            DuplicateKeyError: If the account number is already taken
        """
        if account.account_number in self._accounts:
            raise DuplicateKeyError(
                f"Account number {account.account_number} already exists",
                account_number=account.account_number
            )
        self._accounts[account.account_number] = account

    def get_account(self, account_number: str) -> Account:
        """
        Load an account

        Raises:
            NotFoundError: If no account has this number
        """
        account = self._accounts.get(account_number)
        if account is None:
            raise NotFoundError(
                f"Account {account_number} not found",
                account_number=account_number
            )
        return account

    def account_exists(self, account_number: str) -> bool:
        return account_number in self._accounts

    def list_accounts(self) -> List[Account]:
        return list(self._accounts.values())

    def count(self) -> int:
        return len(self._accounts)
