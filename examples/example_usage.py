#!/usr/bin/env python3
"""
Example usage of the SFWW Purchase Order Parser
Parses sample OCR text for each supported vendor layout.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from po_parser import PurchaseOrderParser, detect


SAMPLES = {
    "Baker Boys": """
    Baker Boys Distribution
    P.O. Number: 55120
    10-2045 EACH 24 24 0 8.50 204.00 BAKER SKATE DECK 8.0 Whse: 01 Bin A4
    10-3310 EACH 120 120 0 11.25 1,350.00 SHAKE JUNT GRIPTAPE
    """,
    "Violent Gentlemen": """
    Violent Gentlemen
    Purchase Order# VG-10442
    Roadkill Hoodie VGFW24-117 Heather Fleece 0 6 12 12 6 0 36 $28.50 $1,026.00 8 $31.00 $248.00
    """,
    "Unknown vendor": """
    ACME SUPPLY CO
    Sold To: Steadfast Wholesale
    P.O. # 77812
    AB-100 Widget 5 $2.00 $10.00
    Blue anodized widget
    """,
}


def main():
    """Parse every sample and print the line items."""
    parser = PurchaseOrderParser()

    for label, text in SAMPLES.items():
        print("=" * 60)
        print(f"{label} -> grammar '{detect(text).name}'")
        print("=" * 60)
        print(json.dumps([item.to_dict() for item in parser.parse(text)], indent=2))


if __name__ == "__main__":
    main()
