"""
Transaction Log Module

Records a typed, signed entry for every successful account mutation.
Outflows (withdrawals, transfers out) carry a negative amount; inflows and
account creation carry a positive one.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, TextIO, Union

from .currency import Currency, format_amount, to_decimal


class TransactionType(Enum):
    """Types of logged transactions"""
    ACCOUNT_CREATION = "Account Creation"
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"
    TRANSFER_OUT = "Transfer Out"
    TRANSFER_IN = "Transfer In"


@dataclass(frozen=True)
class TransactionRecord:
    """Single logged transaction"""
    transaction_type: TransactionType
    account_number: str
    amount: Decimal
    timestamp: datetime = field(default_factory=datetime.now)


def _make_record(
    transaction_type: Union[TransactionType, str],
    account_number: str,
    amount: Any
) -> TransactionRecord:
    # Plain strings must match one of the TransactionType values exactly
    if not isinstance(transaction_type, TransactionType):
        transaction_type = TransactionType(transaction_type)
    return TransactionRecord(
        transaction_type=transaction_type,
        account_number=account_number,
        amount=to_decimal(amount)
    )


class TransactionLoggerInterface(ABC):
    """Abstract interface for transaction loggers"""

    @abstractmethod
    def log_transaction(
        self,
        transaction_type: Union[TransactionType, str],
        account_number: str,
        amount: Any
    ) -> None:
        """Record one transaction"""
        pass


class ConsoleTransactionLogger(TransactionLoggerInterface):
    """
    Writes one human-readable line per transaction, e.g.

        2024-05-01 10:15:00: Transfer Out - Account: A1, Amount: -$40.00
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        currency: Currency = Currency.USD,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    ):
        self._stream = stream
        self.currency = currency
        self.timestamp_format = timestamp_format

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so output capture that swaps sys.stdout still works
        return self._stream if self._stream is not None else sys.stdout

    def format_record(self, record: TransactionRecord) -> str:
        """Render a record as a single line"""
        return (
            f"{record.timestamp.strftime(self.timestamp_format)}: "
            f"{record.transaction_type.value} - Account: {record.account_number}, "
            f"Amount: {format_amount(record.amount, self.currency)}"
        )

    def log_transaction(
        self,
        transaction_type: Union[TransactionType, str],
        account_number: str,
        amount: Any
    ) -> None:
        record = _make_record(transaction_type, account_number, amount)
        self.stream.write(self.format_record(record) + "\n")
        self.stream.flush()


class InMemoryTransactionLogger(TransactionLoggerInterface):
    """Keeps logged transactions in a list, oldest first"""

    def __init__(self):
        self._records: List[TransactionRecord] = []

    @property
    def records(self) -> List[TransactionRecord]:
        return list(self._records)

    def log_transaction(
        self,
        transaction_type: Union[TransactionType, str],
        account_number: str,
        amount: Any
    ) -> None:
        self._records.append(_make_record(transaction_type, account_number, amount))

    def get_records_for_account(self, account_number: str) -> List[TransactionRecord]:
        """Get all records logged against one account"""
        return [r for r in self._records if r.account_number == account_number]

    def clear(self) -> None:
        """Drop all records"""
        self._records = []
