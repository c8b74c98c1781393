#!/usr/bin/env python3
"""
Spreadsheet writer: appends one document's line items to a CSV sheet.
"""

import csv
import os
import re
import logging
import threading
from decimal import Decimal
from typing import List, Sequence

from .models import LineItem
from .normalizer import is_nan
from .errors import SheetWriteError

logger = logging.getLogger(__name__)

HEADER = [
    "Outer PO",
    "Invoice",
    "Customer",
    "PO",
    "Style",
    "Description",
    "Qty",
    "Unit Price",
    "Total Amount",
]

OUTER_PO_PATTERN = re.compile(r'SFWW\s+PO#\s*(\d+)', re.IGNORECASE)


def outer_po_from_filename(filename: str) -> str:
    """Upstream PO identifier encoded in a file name as 'SFWW PO# <digits>'."""
    match = OUTER_PO_PATTERN.search(os.path.basename(filename or ""))
    return match.group(1) if match else ""


def build_rows(items: Sequence[LineItem], outer_po: str) -> List[List[str]]:
    """One row per item followed by the grand-total row."""
    rows = [[outer_po, outer_po] + item.to_row() for item in items]

    total_qty = sum(item.qty for item in items if not is_nan(item.qty))
    total_amount = sum(
        (item.total_amount for item in items if not is_nan(item.total_amount)),
        Decimal("0"),
    )
    rows.append([outer_po, outer_po, "", "", "", "TOTAL", str(total_qty), "", str(total_amount)])
    return rows


class SheetWriter:
    """Appends rows beneath the existing data of a CSV sheet."""

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _is_empty(self) -> bool:
        return not os.path.exists(self.path) or os.path.getsize(self.path) == 0

    def append(self, items: Sequence[LineItem], outer_po: str) -> int:
        """
        Append a document's items plus its total row.

        Args:
            items: Parsed line items, in document order
            outer_po: PO identifier of the owning document

        Returns:
            Number of rows written, header included
        """
        rows = build_rows(items, outer_po)

        with self._lock:
            if self._is_empty():
                rows.insert(0, HEADER)
            try:
                directory = os.path.dirname(self.path)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                with open(self.path, 'a', newline='', encoding='utf-8') as f:
                    csv.writer(f).writerows(rows)
            except OSError as e:
                raise SheetWriteError(f"Could not append to {self.path}: {e}") from e

        logger.info(f"Appended {len(rows)} rows for PO {outer_po or '?'} to {self.path}")
        return len(rows)
