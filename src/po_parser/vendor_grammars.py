#!/usr/bin/env python3
"""
Vendor-specific grammars for purchase order OCR text.

Each grammar knows the layout of exactly one vendor's PO document. Literals
stay local to their grammar so a fix for one vendor cannot regress another.
"""

import re
import logging
from typing import List, Optional, Sequence, Tuple

from .models import LineItem
from .normalizer import parse_amount, parse_quantity, derive_unit_price

logger = logging.getLogger(__name__)

# A numeric token that starts and ends with a digit ("1,234.50", "12,50", "7")
AMOUNT = r'\d(?:[\d.,]*\d)?'


def _phrase(literal: str) -> str:
    """Regex for a literal phrase with liberal whitespace around words and dashes."""
    pattern = r'\s+'.join(re.escape(word) for word in literal.split())
    return pattern.replace(r'\s+\-\s+', r'\s*-\s*')


def _lines(text: str) -> List[str]:
    """Trimmed, non-empty lines of the text."""
    return [line.strip() for line in text.split('\n') if line.strip()]


def _first_group(patterns: Sequence[re.Pattern], text: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return None


class VendorGrammar:
    """Base class: a detection rule plus the extraction logic for one layout."""

    name = "base"
    customer = ""
    markers: Tuple[str, ...] = ()
    po_patterns: Tuple[re.Pattern, ...] = ()

    def matches(self, text: str) -> bool:
        return any(marker in text for marker in self.markers)

    def extract_po_number(self, text: str) -> str:
        return _first_group(self.po_patterns, text) or ""

    def extract(self, text: str) -> List[LineItem]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class EmptyGrammar(VendorGrammar):
    """No-op grammar used for blank OCR output."""

    name = "empty"

    def matches(self, text: str) -> bool:
        return not text.strip()

    def extract(self, text: str) -> List[LineItem]:
        return []


class RippleJunctionGrammar(VendorGrammar):
    """
    Ripple Junction POs list one style family per document.

    Item rows look like::

        ZQBQ99A 001 BLACK 5 GODZILLA CLASSIC KING OF MINI 10 12.50 125.00

    and may repeat for every size, so the whole text is searched globally.
    """

    name = "ripple_junction"
    customer = "Ripple Junction"
    markers = ("RIPPLE JUNCTION", "ZQBQ")
    po_patterns = (re.compile(r'\b(\d{6})\s+REVISION'),)

    description = "GODZILLA CLASSIC KING OF MINI"
    style_pattern = re.compile(r'ZQBQ[A-Z0-9]*')
    item_pattern = re.compile(
        r'(?<!\S)(?P<style>\S+)\s+\d+\s+BLACK\s+\S+\s+'
        r'GODZILLA[\s-]+CLASSIC[\s-]+KING[\s-]+OF[\s-]+MINI\s+'
        r'(?P<qty>\d+)\s+(?P<unit>' + AMOUNT + r')\s+(?P<total>' + AMOUNT + r')'
    )

    def extract(self, text: str) -> List[LineItem]:
        po = self.extract_po_number(text)
        items = []

        for match in self.item_pattern.finditer(text):
            style = self.style_pattern.search(match.group('style'))
            if not style:
                logger.debug(f"Skipping row without a ZQBQ style: {match.group(0)!r}")
                continue

            items.append(LineItem(
                customer=self.customer,
                po=po,
                style=style.group(0),
                description=self.description,
                qty=parse_quantity(match.group('qty')),
                unit_price=parse_amount(match.group('unit')),
                total_amount=parse_amount(match.group('total')),
            ))

        logger.debug(f"Ripple Junction: {len(items)} item rows")
        return items


class FAWorldGrammar(VendorGrammar):
    """
    FA World Entertainment POs carry a fixed set of product blocks.

    A block starts with the product name and color, lists size breakdowns
    (the "Xs" row carries the unit price), and ends with ``Qty <n> Total <amt>``.
    """

    name = "fa_world"
    customer = "FA World Entertainment"
    markers = ("FA World Entertainment",)
    po_patterns = (re.compile(r'\bPO\b\s*#?\s*:?\s*(\d[\w-]*)'),)

    products = (
        ("Pile Fleece Overshirt", "Black - Black"),
        ("Corduroy Lounge Pants - Fall 25", "Brown - Brown"),
    )
    unit_price_pattern = re.compile(r'\bXs\s+\d+\s+\$?\s*(' + AMOUNT + r')')

    def _block_pattern(self, product: str, color: str) -> re.Pattern:
        # The body may not run into another product's block
        others = [_phrase(name) for name, _ in self.products if name != product]
        step = r'(?:(?!' + '|'.join(others) + r').)' if others else '.'
        return re.compile(
            _phrase(product) + r'\s+' + _phrase(color)
            + r'(?P<body>' + step + r'{0,600}?)\bQty\s*:?\s*(?P<qty>\d[\d,]*)\s+'
            r'Total\s*:?\s*\$?\s*(?P<total>' + AMOUNT + r')',
            re.DOTALL,
        )

    def extract(self, text: str) -> List[LineItem]:
        po = self.extract_po_number(text)
        items = []

        for product, color in self.products:
            block = self._block_pattern(product, color).search(text)
            if not block:
                logger.debug(f"FA World: no block for {product!r}")
                continue

            qty = parse_quantity(block.group('qty'))
            total = parse_amount(block.group('total'))
            unit = self.unit_price_pattern.search(block.group('body'))
            unit_price = parse_amount(unit.group(1)) if unit else derive_unit_price(total, qty)

            items.append(LineItem(
                customer=self.customer,
                po=po,
                style=product,
                description=f"{product} - {color}",
                qty=qty,
                unit_price=unit_price,
                total_amount=total,
            ))

        return items


class ViolentGentlemenGrammar(VendorGrammar):
    """
    Violent Gentlemen POs are one style per line, with size columns between
    the descriptive fields and the quantity/price/total group. An oversize
    run may trail on the same line as a second quantity/price/total group.
    """

    name = "violent_gentlemen"
    customer = "Violent Gentlemen"
    markers = ("Violent Gentlemen",)
    po_patterns = (re.compile(r'Purchase\s+Order\s*#\s*:?\s*([\w-]+)'),)

    line_pattern = re.compile(
        r'^(?P<style_name>.+?)\s+(?P<style_code>[A-Z]{2,}[A-Z0-9-]*\d[A-Z0-9-]*)\s+'
        r'(?P<field1>\S+)\s+(?P<field2>\S+)\s+'
        r'(?:\d+\s+){5,8}'
        r'(?P<qty>\d+)\s+\$\s*(?P<unit>' + AMOUNT + r')\s+\$\s*(?P<total>' + AMOUNT + r')'
    )
    oversize_pattern = re.compile(
        r'(\d+)\s+\$\s*(' + AMOUNT + r')\s+\$\s*(' + AMOUNT + r')'
    )

    def extract(self, text: str) -> List[LineItem]:
        po = self.extract_po_number(text)
        items = []

        for line in _lines(text):
            match = self.line_pattern.search(line)
            if not match:
                continue

            style = match.group('style_code')
            description = " ".join(
                match.group(key).strip() for key in ('style_name', 'field1', 'field2')
            )
            items.append(LineItem(
                customer=self.customer,
                po=po,
                style=style,
                description=description,
                qty=parse_quantity(match.group('qty')),
                unit_price=parse_amount(match.group('unit')),
                total_amount=parse_amount(match.group('total')),
            ))

            oversize = self.oversize_pattern.search(line[match.end():])
            if oversize:
                items.append(LineItem(
                    customer=self.customer,
                    po=po,
                    style=f"{style}-OVERSIZE",
                    description=f"{description}-OVERSIZE",
                    qty=parse_quantity(oversize.group(1)),
                    unit_price=parse_amount(oversize.group(2)),
                    total_amount=parse_amount(oversize.group(3)),
                ))

        return items


class BakerBoysGrammar(VendorGrammar):
    """Baker Boys Distribution POs: ``<code> EACH <qty> <n> <n> <unit> <total> <description>``."""

    name = "baker_boys"
    customer = "Baker Boys Distribution"
    markers = ("Baker Boys Distribution",)
    po_patterns = (re.compile(r'P\.O\.\s*Number:\s*([\w-]+)'),)

    line_pattern = re.compile(
        r'^(?P<code>\d[\d-]*)\s+EACH\s+(?P<qty>\d[\d,]*)\s+'
        + AMOUNT + r'\s+' + AMOUNT + r'\s+'
        r'(?P<unit>' + AMOUNT + r')\s+(?P<total>' + AMOUNT + r')'
        r'(?:\s+(?P<description>.*))?$'
    )

    def extract(self, text: str) -> List[LineItem]:
        po = self.extract_po_number(text)
        items = []

        for line in _lines(text):
            match = self.line_pattern.match(line)
            if not match:
                continue

            description = (match.group('description') or "").split("Whse:", 1)[0].strip()
            items.append(LineItem(
                customer=self.customer,
                po=po,
                style=match.group('code'),
                description=description,
                qty=parse_quantity(match.group('qty')),
                unit_price=parse_amount(match.group('unit')),
                total_amount=parse_amount(match.group('total')),
            ))

        return items


class GenericGrammar(VendorGrammar):
    """
    Fallback for unknown vendors.

    Any line starting with a style-like token and carrying a quantity followed
    by two dollar amounts becomes an item. Unrelated digit runs (dates, SKU
    fragments) before the prices are taken as the quantity.
    """

    name = "generic"
    customer_patterns = (
        re.compile(r'Customer\s*:\s*(.+)', re.IGNORECASE),
        re.compile(r'SOLD\s+TO\s*:\s*(.+)', re.IGNORECASE),
        re.compile(r'BILL\s+TO\s*:\s*(.+)', re.IGNORECASE),
    )
    po_patterns = (
        re.compile(r'\bP\.?\s?O\b\.?\s*(?:#|No\.?|Number)?\s*:?\s*([A-Z0-9-]*\d[\w-]*)', re.IGNORECASE),
        re.compile(r'Purchase\s+Order\s*(?:#|No\.?|Number)?\s*:?\s*([A-Z0-9-]*\d[\w-]*)', re.IGNORECASE),
    )

    dollar = r'\$\s*([\d,]+(?:\.\d+)?)'
    line_pattern = re.compile(
        r'^\s*([A-Za-z0-9-]+)\s+.*?(\d+).*?' + dollar + r'.*?' + dollar
    )
    dollar_pattern = re.compile(r'\$\s*[\d,]+(?:\.\d+)?')

    def matches(self, text: str) -> bool:
        return True

    def extract_customer(self, text: str) -> str:
        return _first_group(self.customer_patterns, text) or "Unknown"

    def _synthesize_description(self, line: str, style: str) -> str:
        description = line.replace(style, "", 1)
        description = re.sub(r'\d+', "", description, count=1)
        description = self.dollar_pattern.sub("", description)
        return " ".join(description.split())

    def extract(self, text: str) -> List[LineItem]:
        customer = self.extract_customer(text)
        po = self.extract_po_number(text)
        lines = text.split('\n')
        items = []

        for index, line in enumerate(lines):
            match = self.line_pattern.search(line)
            if not match:
                continue

            style, qty, unit, total = match.groups()
            next_line = lines[index + 1].strip() if index + 1 < len(lines) else ""
            if next_line and "$" not in next_line:
                description = next_line
            else:
                description = self._synthesize_description(line, style)

            items.append(LineItem(
                customer=customer,
                po=po,
                style=style,
                description=description,
                qty=parse_quantity(qty),
                unit_price=parse_amount(unit),
                total_amount=parse_amount(total),
            ))

        logger.debug(f"Generic grammar matched {len(items)} of {len(lines)} lines")
        return items
