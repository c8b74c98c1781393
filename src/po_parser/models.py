"""
Data models for the purchase order parser.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Union


@dataclass
class LineItem:
    """Represents a single ordered style/quantity/price combination."""
    customer: str = ""
    po: str = ""
    style: str = ""
    description: str = ""
    qty: Union[int, float] = 0
    unit_price: Decimal = field(default_factory=lambda: Decimal("0"))
    total_amount: Decimal = field(default_factory=lambda: Decimal("0"))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; amounts are kept as strings."""
        return {
            "customer": self.customer,
            "po": self.po,
            "style": self.style,
            "description": self.description,
            "qty": self.qty,
            "unitPrice": str(self.unit_price),
            "totalAmount": str(self.total_amount),
        }

    def to_row(self) -> List[str]:
        """Cells for the customer..total_amount columns of a sheet row."""
        return [
            self.customer,
            self.po,
            self.style,
            self.description,
            str(self.qty),
            str(self.unit_price),
            str(self.total_amount),
        ]
