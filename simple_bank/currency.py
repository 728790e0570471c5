"""
Currency Support Module

Handles ISO 4217 display codes and Decimal coercion for monetary amounts.
NEVER uses float for monetary values; floats are routed through str() first.
"""

from decimal import Decimal, Inexact, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from enum import Enum
from typing import Any

from .errors import ValidationError

# Set global decimal context for financial precision
getcontext().prec = 28  # High precision for financial calculations

# Most significant digits an amount or balance may carry
MAX_DIGITS = 28


class Currency(Enum):
    """ISO 4217 Currency Codes with precision and display symbol"""
    USD = ("USD", 2, "$")   # US Dollar, 2 decimal places
    EUR = ("EUR", 2, "€")   # Euro, 2 decimal places
    GBP = ("GBP", 2, "£")   # British Pound, 2 decimal places
    JPY = ("JPY", 0, "¥")   # Japanese Yen, 0 decimal places
    CAD = ("CAD", 2, "CA$")  # Canadian Dollar, 2 decimal places
    CHF = ("CHF", 2, "CHF ")  # Swiss Franc, 2 decimal places

    def __init__(self, code: str, precision: int, symbol: str):
        self.code = code
        self.precision = precision
        self.symbol = symbol

    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Look up a currency by its ISO code (case-insensitive)"""
        for currency in cls:
            if currency.code == code.strip().upper():
                return currency
        raise ValueError(f"Unsupported currency code: {code}")


def to_decimal(value: Any, field_name: str = "Amount") -> Decimal:
    """
    Coerce a monetary input to Decimal

    Args:
        value: Decimal, int, str or float amount
        field_name: Name used in the error message

    Returns:
        Decimal value (not rounded)

    Raises:
        ValidationError: If the value is missing, not numeric, not finite
            or has more than MAX_DIGITS significant digits
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"{field_name} must be a number, got {value!r}")

    if not result.is_finite():
        raise ValidationError(f"{field_name} must be a finite number")
    if len(result.as_tuple().digits) > MAX_DIGITS:
        raise ValidationError(f"{field_name} exceeds {MAX_DIGITS} significant digits")
    return result


def exact_add(left: Decimal, right: Decimal) -> Decimal:
    """
    Add two amounts without rounding

    Raises:
        ValidationError: If the result needs more than MAX_DIGITS significant digits
    """
    with localcontext() as ctx:
        ctx.prec = MAX_DIGITS
        ctx.traps[Inexact] = True
        try:
            return left + right
        except Inexact:
            raise ValidationError(f"Resulting balance exceeds {MAX_DIGITS} significant digits")


def parse_amount(text: str) -> Decimal:
    """
    Parse an amount typed at the console

    Accepts an optional leading currency symbol and comma thousands
    separators, e.g. "$1,250.50".

    Raises:
        ValueError: If the text is not a finite decimal number
    """
    if text is None:
        raise ValueError("Value must be a non-empty string")

    clean_value = text.strip()
    for currency in Currency:
        symbol = currency.symbol.strip()
        if clean_value.startswith(symbol):
            clean_value = clean_value[len(symbol):].strip()
            break
    clean_value = clean_value.replace(',', '')

    if not clean_value:
        raise ValueError("Value must be a non-empty string")

    try:
        result = Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{text}' to Decimal")

    if not result.is_finite():
        raise ValueError(f"Cannot convert '{text}' to Decimal")
    return result


def validate_decimal_precision(value: Decimal, currency: Currency) -> Decimal:
    """
    Round decimal to currency precision

    Args:
        value: Decimal to round
        currency: Currency defining precision

    Returns:
        Properly rounded Decimal
    """
    with localcontext() as ctx:
        # Room for every integer digit plus the fraction digits
        ctx.prec = max(ctx.prec, value.adjusted() + currency.precision + 2)
        return value.quantize(
            Decimal('0.1') ** currency.precision,
            rounding=ROUND_HALF_UP
        )


def format_amount(amount: Decimal, currency: Currency = Currency.USD) -> str:
    """Format for display, e.g. -$40.00"""
    rounded = validate_decimal_precision(amount, currency)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency.symbol}{rounded.copy_abs():,.{currency.precision}f}"
