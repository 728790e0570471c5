"""
Banking Error Module

Named faults raised by the account, storage and service layers. Insufficient
funds is deliberately absent: it is reported as a False result, not raised.
"""

from typing import Optional


class BankingError(Exception):
    """Base class for all banking faults surfaced to the console"""
    pass


class ValidationError(BankingError, ValueError):
    """An argument violates a precondition (blank id, non-positive amount, ...)"""
    pass


class DuplicateKeyError(BankingError, ValueError):
    """An account number collides with an existing account"""
    
    def __init__(self, message: str, account_number: Optional[str] = None):
        super().__init__(message)
        self.account_number = account_number


class NotFoundError(BankingError, LookupError):
    """A referenced account number does not exist"""
    
    def __init__(self, message: str, account_number: Optional[str] = None):
        super().__init__(message)
        self.account_number = account_number
