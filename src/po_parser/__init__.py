"""
SFWW Purchase Order Parser

Extracts purchase-order line items from vendor OCR text and appends them to a sheet.
"""

__version__ = "1.0.0"

from .models import LineItem
from .detector import detect
from .parser import PurchaseOrderParser, parse

__all__ = [
    "LineItem",
    "PurchaseOrderParser",
    "detect",
    "parse",
]
