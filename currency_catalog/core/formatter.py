"""
Amount formatting for currency records.

Renders a number as "<symbol><grouped integer>.<fraction>" using the
record's decimal precision. Rounding uses ROUND_HALF_UP on the decimal
representation of the amount, so ties go away from zero and floats are
rounded as written (2.675 -> 2.68) rather than by their binary value.

Negative amounts put the minus sign in front of everything, including a
leading symbol: -$1,234.56 and -1,234.56€.
"""

import logging
from decimal import Decimal, localcontext
from typing import Union

from currency_catalog.core.constants import (
    DECIMAL_SEPARATOR,
    GROUP_SEPARATOR,
    GROUP_SIZE,
    MAX_AMOUNT_DIGITS,
    MAX_DECIMAL_DIGITS,
    ROUNDING_MODE,
)
from currency_catalog.core.exceptions import ParameterTypeError, ParameterValueError
from currency_catalog.core.models import CurrencyRecord, SymbolPosition

logger = logging.getLogger(__name__)

Amount = Union[int, float, Decimal]


def to_decimal(amount: Amount) -> Decimal:
    """
    Convert a numeric amount to a finite Decimal.

    Floats go through str() so that 1234.567 becomes Decimal('1234.567').

    Raises:
        ParameterTypeError: If amount is not an int, float or Decimal (bools rejected)
        ParameterValueError: If amount is NaN or infinite
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise ParameterTypeError(
            f"Amount must be an int, float or Decimal, got {type(amount).__name__}",
            parameter="amount",
            value=amount
        )

    value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    if not value.is_finite():
        raise ParameterValueError(
            f"Amount must be finite, got {amount!r}",
            parameter="amount",
            value=amount
        )
    return value


def group_digits(digits: str, separator: str = GROUP_SEPARATOR, size: int = GROUP_SIZE) -> str:
    """Insert separator every `size` digits counting from the right."""
    head = len(digits) % size or size
    groups = [digits[:head]]
    groups.extend(digits[i:i + size] for i in range(head, len(digits), size))
    return separator.join(groups)


def format_number(amount: Amount, decimal_digits: int) -> str:
    """
    Format a number with thousands grouping and fixed precision.

    Args:
        amount: Value to format
        decimal_digits: Number of fractional digits, 0 drops the fraction entirely

    Returns:
        e.g. "1,234.57" for (1234.567, 2), "-1,235" for (-1234.5, 0)
    """
    if isinstance(decimal_digits, bool) or not isinstance(decimal_digits, int) or not 0 <= decimal_digits <= MAX_DECIMAL_DIGITS:
        raise ParameterValueError(
            f"decimal_digits must be an integer between 0 and {MAX_DECIMAL_DIGITS}, got {decimal_digits!r}",
            parameter="decimal_digits",
            value=decimal_digits
        )

    value = to_decimal(amount)
    if value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise ParameterValueError(
            f"Amount is too large to format: more than {MAX_AMOUNT_DIGITS} integer digits",
            parameter="amount",
            value=amount
        )

    # Room for every integer digit plus the requested fraction
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimal_digits + 2)
        rounded = value.quantize(Decimal(1).scaleb(-decimal_digits), rounding=ROUNDING_MODE)

    negative = rounded < 0
    integer_part, _, fraction_part = f"{abs(rounded):f}".partition(".")

    number = group_digits(integer_part)
    if decimal_digits:
        number = f"{number}{DECIMAL_SEPARATOR}{fraction_part}"
    return f"-{number}" if negative else number


def format_amount(
    amount: Amount,
    currency: CurrencyRecord,
    *,
    native: bool = False,
    symbol_position: Union[SymbolPosition, str] = SymbolPosition.BEFORE,
) -> str:
    """
    Format an amount with a currency's symbol and precision.

    Args:
        amount: Value to format (int, float or Decimal)
        currency: Record supplying the symbol and decimal_digits
        native: Use symbol_native instead of the international symbol
        symbol_position: SymbolPosition or "before"/"after"

    Returns:
        Formatted string, e.g. "$1,234.56", "1,234.56€", "-¥1,234"

    Example:
        >>> format_amount(1234.567, kwd)
        'KD1,234.567'
    """
    position = SymbolPosition.parse(symbol_position)
    number = format_number(amount, currency.decimal_digits or 0)
    symbol = (currency.symbol_native if native else currency.symbol) or ""

    sign = ""
    if number.startswith("-"):
        sign, number = "-", number[1:]

    if position is SymbolPosition.AFTER:
        return f"{sign}{number}{symbol}"
    return f"{sign}{symbol}{number}"


class AmountFormatter:
    """
    Formatter bound to a set of default options.

    The catalog keeps one of these built from configuration; per-call
    arguments override the defaults.
    """

    def __init__(self, native: bool = False, symbol_position: Union[SymbolPosition, str] = SymbolPosition.BEFORE):
        self.native = native
        self.symbol_position = SymbolPosition.parse(symbol_position)

    def format(self, amount: Amount, currency: CurrencyRecord, native=None, symbol_position=None) -> str:
        """Format amount for currency, falling back to this formatter's defaults."""
        result = format_amount(
            amount,
            currency,
            native=self.native if native is None else native,
            symbol_position=self.symbol_position if symbol_position is None else symbol_position,
        )
        logger.debug(f"Formatted {amount!r} {currency.code} -> {result}")
        return result
