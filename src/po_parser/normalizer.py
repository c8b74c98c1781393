#!/usr/bin/env python3
"""
Numeric normalization shared by all vendor grammars.

OCR output mixes thousands separators, currency symbols and the odd decimal
comma. Everything is funneled through Babel's ``parse_decimal`` so the
grammars never have to care which separator they captured.
"""

import re
import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from babel.numbers import parse_decimal, NumberFormatError

logger = logging.getLogger(__name__)

NAN = Decimal("NaN")

# "12,50" or "1.234,50": a comma followed by exactly two trailing digits
_DECIMAL_COMMA = re.compile(r',\d{2}$')


def _clean_token(token: str) -> str:
    """Remove currency symbols and whitespace from a captured token."""
    return re.sub(r'[\s$€£¥]', '', token or '')


def _locale_for(token: str) -> str:
    """Pick the parsing locale from the separator layout of the token."""
    if _DECIMAL_COMMA.search(token) and token.rfind(',') > token.rfind('.'):
        return 'de_DE'
    return 'en_US'


def parse_amount(token: str) -> Decimal:
    """
    Convert a textual money amount into a Decimal.

    Args:
        token: Raw token such as "$1,234.50" or "12,50"

    Returns:
        Parsed Decimal, or Decimal('NaN') when the token is not a number
    """
    cleaned = _clean_token(token)
    if not cleaned:
        return NAN

    try:
        return parse_decimal(cleaned, locale=_locale_for(cleaned))
    except NumberFormatError:
        logger.debug(f"Unparseable amount: {token!r}")
        return NAN


def parse_quantity(token: str) -> Union[int, float]:
    """Convert a textual quantity into an int; float('nan') when malformed."""
    cleaned = _clean_token(token).replace(',', '')
    try:
        return int(cleaned)
    except ValueError:
        logger.debug(f"Unparseable quantity: {token!r}")
        return float('nan')


def is_nan(value) -> bool:
    """True for float and Decimal NaN values."""
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return value != value
    return False


def derive_unit_price(total: Decimal, qty: Union[int, float]) -> Decimal:
    """Unit price computed as total / qty when the document omits it."""
    if is_nan(total) or is_nan(qty) or not qty:
        return NAN
    try:
        return total / Decimal(qty)
    except (InvalidOperation, ZeroDivisionError):
        return NAN
