"""
Account Management Module

Defines the account capabilities as narrow interfaces (identity view,
deposit/withdraw operations, transfer operation) and the Account class that
implements them while enforcing the non-negative balance invariant.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from .currency import exact_add, to_decimal
from .errors import ValidationError


@dataclass(frozen=True)
class AccountSnapshot:
    """
    Immutable read-only copy of an account's state.
    Later mutations of the live account are not reflected here.
    """
    account_number: str
    owner_name: str
    balance: Decimal
    created_at: datetime


class AccountView(ABC):
    """Read-only identity and balance view of an account"""

    @property
    @abstractmethod
    def account_number(self) -> str:
        """Unique account number"""
        pass

    @property
    @abstractmethod
    def owner_name(self) -> str:
        """Name of the account holder"""
        pass

    @abstractmethod
    def get_balance(self) -> Decimal:
        """Current balance"""
        pass


class TransactionOperations(ABC):
    """Deposit and withdrawal capability"""

    @abstractmethod
    def deposit(self, amount: Any) -> None:
        """Credit a positive amount"""
        pass

    @abstractmethod
    def withdraw(self, amount: Any) -> bool:
        """Debit a positive amount; False when funds are insufficient"""
        pass


class TransferOperations(ABC):
    """Account-to-account transfer capability"""

    @abstractmethod
    def transfer(self, recipient: AccountView, amount: Any) -> bool:
        """Move funds to recipient; False when funds are insufficient"""
        pass


def _validate_positive(amount: Any, operation: str) -> Decimal:
    value = to_decimal(amount, f"{operation} amount")
    if value <= Decimal('0'):
        raise ValidationError(f"{operation} amount must be positive")
    return value


class Account(AccountView, TransactionOperations, TransferOperations):
    """
    Bank account holding an identity and a non-negative balance.

    The balance is only changed through deposit, withdraw and transfer.
    Every check happens before any mutation, so a failed operation
    leaves the account untouched.
    """

    def __init__(
        self,
        account_number: str,
        owner_name: str,
        initial_balance: Any = Decimal('0')
    ):
        if account_number is None or not str(account_number).strip():
            raise ValidationError("Account number cannot be empty")
        if not isinstance(account_number, str):
            raise ValidationError("Account number must be a string")

        if owner_name is None or not str(owner_name).strip():
            raise ValidationError("Owner name cannot be empty")
        if not isinstance(owner_name, str):
            raise ValidationError("Owner name must be a string")

        balance = to_decimal(initial_balance, "Initial balance")
        if balance < Decimal('0'):
            raise ValidationError("Initial balance cannot be negative")

        self._account_number = account_number
        self._owner_name = owner_name
        self._balance = balance
        self._created_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"Account({self._account_number!r}, owner={self._owner_name!r}, balance={self._balance})"

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def get_balance(self) -> Decimal:
        return self._balance

    def snapshot(self) -> AccountSnapshot:
        """Take an immutable copy of the current state"""
        return AccountSnapshot(
            account_number=self._account_number,
            owner_name=self._owner_name,
            balance=self._balance,
            created_at=self._created_at
        )

    def deposit(self, amount: Any) -> None:
        """
        Credit the account

        Raises:
            ValidationError: If amount is not a positive number, or the new
                balance would need more than MAX_DIGITS significant digits
        """
        value = _validate_positive(amount, "Deposit")
        self._balance = exact_add(self._balance, value)

    def withdraw(self, amount: Any) -> bool:
        """
        Debit the account if funds allow

        Returns:
            True if the balance was debited, False on insufficient funds

        Raises:
            ValidationError: If amount is not a positive number
        """
        value = _validate_positive(amount, "Withdrawal")
        if value > self._balance:
            return False

        self._balance = exact_add(self._balance, value.copy_negate())
        return True

    def transfer(self, recipient: Optional[AccountView], amount: Any) -> bool:
        """
        Move funds from this account to recipient

        Both balances move or neither does: the funds check runs before
        either account is touched, and the recipient is credited through
        its own deposit path.

        Args:
            recipient: Destination account
            amount: Positive amount to move

        Returns:
            True on success, False on insufficient funds

        Raises:
            ValidationError: If recipient is missing or amount is not positive
        """
        if recipient is None:
            raise ValidationError("Transfer recipient is required")

        if not isinstance(recipient, TransactionOperations):
            raise ValidationError("Transfer recipient cannot accept deposits")

        value = _validate_positive(amount, "Transfer")
        if value > self._balance:
            return False

        # Both new balances must be exact before either account is touched
        new_balance = exact_add(self._balance, value.copy_negate())
        if recipient is not self:
            exact_add(recipient.get_balance(), value)

        self._balance = new_balance
        recipient.deposit(value)
        return True
