#!/usr/bin/env python3
"""
Tests for the Purchase Order Parser
"""

import json
import os
import tempfile
import unittest
from decimal import Decimal

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from po_parser import PurchaseOrderParser, parse
from samples import (
    RIPPLE_JUNCTION_TEXT,
    FA_WORLD_TEXT,
    VIOLENT_GENTLEMEN_TEXT,
    BAKER_BOYS_TEXT,
    GENERIC_TEXT,
)


class TestPurchaseOrderParser(unittest.TestCase):
    """Test cases for the PurchaseOrderParser."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = PurchaseOrderParser()

    def test_blank_input_returns_no_items(self):
        for text in ["", " ", "\n\n", "\t  \r\n"]:
            with self.subTest(text=text):
                self.assertEqual(self.parser.parse(text), [])

    def test_non_string_input_raises(self):
        with self.assertRaises(TypeError):
            self.parser.parse(None)

    def test_routes_to_vendor_grammar(self):
        test_cases = [
            (RIPPLE_JUNCTION_TEXT, "Ripple Junction", 3),
            (FA_WORLD_TEXT, "FA World Entertainment", 2),
            (VIOLENT_GENTLEMEN_TEXT, "Violent Gentlemen", 3),
            (BAKER_BOYS_TEXT, "Baker Boys Distribution", 2),
            (GENERIC_TEXT, "Steadfast Wholesale", 3),
        ]

        for text, customer, count in test_cases:
            with self.subTest(customer=customer):
                items = self.parser.parse(text)
                self.assertEqual(len(items), count)
                self.assertTrue(all(item.customer == customer for item in items))

    def test_priority_marker_wins(self):
        text = BAKER_BOYS_TEXT + "\nref ZQBQ"
        items = self.parser.parse(text)
        self.assertEqual(items, [])

    def test_document_order_is_kept(self):
        items = parse(GENERIC_TEXT)
        self.assertEqual([item.style for item in items], ["AB-100", "CD-200", "EF-300"])

    def test_idempotent(self):
        for text in [RIPPLE_JUNCTION_TEXT, FA_WORLD_TEXT, VIOLENT_GENTLEMEN_TEXT,
                     BAKER_BOYS_TEXT, GENERIC_TEXT]:
            with self.subTest(text=text[:20]):
                self.assertEqual(parse(text), parse(text))

    def test_thousands_separator_is_consistent_across_grammars(self):
        texts = [
            "Baker Boys Distribution\n10-1 EACH 1 1 0 1,234.50 1,234.50 DECK",
            "Violent Gentlemen\nTee VG1-1 Black Cotton 1 1 1 1 1 10 $123.45 $1,234.50",
            "X-1 Thing 1 $1,234.50 $1,234.50",
            "ZQBQ1 001 BLACK S GODZILLA CLASSIC KING OF MINI 1 1,234.50 1,234.50",
        ]

        for text in texts:
            with self.subTest(text=text):
                items = parse(text)
                self.assertEqual(len(items), 1)
                self.assertEqual(items[0].total_amount, Decimal("1234.50"))

    def test_malformed_numbers_keep_the_item(self):
        items = parse("Baker Boys Distribution\n10-1 EACH 2 2 0 1.2.3 9.00 DECK")
        self.assertEqual(len(items), 1)
        self.assertTrue(items[0].unit_price.is_nan())
        self.assertEqual(items[0].total_amount, Decimal("9.00"))

    def test_inconsistent_totals_are_logged_not_dropped(self):
        with self.assertLogs('po_parser.parser', level='WARNING') as logs:
            items = self.parser.parse("AB-1 Thing 2 $3.00 $10.00")

        self.assertEqual(len(items), 1)
        self.assertIn("AB-1", logs.output[0])

    def test_parse_to_json(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            output_path = os.path.join(temp_dir, "items.json")
            json_str = self.parser.parse_to_json(
                "123456 REVISION ZQBQ99A 001 BLACK 5 GODZILLA CLASSIC KING OF MINI 10 12.50 125.00",
                output_path,
            )

            with open(output_path, encoding='utf-8') as f:
                self.assertEqual(f.read(), json_str)

        result = json.loads(json_str)
        self.assertEqual(result, [{
            "customer": "Ripple Junction",
            "po": "123456",
            "style": "ZQBQ99A",
            "description": "GODZILLA CLASSIC KING OF MINI",
            "qty": 10,
            "unitPrice": "12.50",
            "totalAmount": "125.00",
        }])


if __name__ == "__main__":
    unittest.main()
