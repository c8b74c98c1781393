#!/usr/bin/env python3
"""
Purchase Order Parser
Turns raw OCR text into the ordered list of line items for one document.
"""

import json
import logging
from decimal import Decimal
from typing import List, Optional

from .models import LineItem
from .detector import detect
from .normalizer import is_nan

logger = logging.getLogger(__name__)

TOLERANCE = Decimal("0.01")


class PurchaseOrderParser:
    """Record aggregator: detector, then grammar, then the item list."""

    def parse(self, text: str) -> List[LineItem]:
        """
        Parse OCR text into line items, in document order.

        Data-quality problems never raise; unmatched lines are skipped and
        malformed numbers come back as NaN.
        """
        grammar = detect(text)
        items = grammar.extract(text)

        logger.info(f"Vendor grammar '{grammar.name}' produced {len(items)} line items")
        for item in items:
            self._check_totals(item)

        return items

    def _check_totals(self, item: LineItem) -> None:
        """Warn when total_amount does not match qty x unit_price."""
        values = (item.qty, item.unit_price, item.total_amount)
        if any(is_nan(value) for value in values):
            logger.warning(f"Line item {item.style!r} has unparseable numbers")
            return

        expected = Decimal(item.qty) * item.unit_price
        if abs(expected - item.total_amount) > TOLERANCE:
            logger.warning(
                f"Line item {item.style!r}: {item.qty} x {item.unit_price} = {expected}, "
                f"document says {item.total_amount}"
            )

    def parse_to_json(self, text: str, output_path: Optional[str] = None) -> str:
        """Parse text and return JSON string, optionally save to file."""
        items = self.parse(text)
        json_str = json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)

        if output_path:
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(json_str)
            logger.info(f"Results saved to: {output_path}")

        return json_str


def parse(text: str) -> List[LineItem]:
    """Convenience function to parse OCR text with a fresh parser."""
    return PurchaseOrderParser().parse(text)
