"""
values.py — Result holder for the adjusted check amounts

AdjustedCheckValues carries the three amounts a point-of-sale integration
submits to the order API: spend, tax and exemption, all in cents.

It is deliberately mutable: the complete-order path overwrites spend_amount
after the proposed-order values have been computed.

SERIALIZATION:
    to_dict() produces the order-API payload shape:
        {"spend_amount": int, "tax_amount": int, "exemption_amount": int}
    Amounts are ALWAYS integers of cents. Never serialize as float.
"""

from __future__ import annotations
from dataclasses import dataclass


SPEND_AMOUNT_KEY = "spend_amount"
TAX_AMOUNT_KEY = "tax_amount"
EXEMPTION_AMOUNT_KEY = "exemption_amount"


@dataclass(slots=True)
class AdjustedCheckValues:
    """
    Spend, tax and exemption amounts (cents) for one payment on a check.

    INVARIANTS (guaranteed when built by the calculator):
    1. 0 <= spend_amount
    2. 0 <= tax_amount <= total outstanding
    3. 0 <= exemption_amount <= total outstanding - tax_amount
    """
    spend_amount: int
    tax_amount: int
    exemption_amount: int

    def to_dict(self) -> dict:
        """Serialize for the order API. Values stay integer cents."""
        return {
            SPEND_AMOUNT_KEY: self.spend_amount,
            TAX_AMOUNT_KEY: self.tax_amount,
            EXEMPTION_AMOUNT_KEY: self.exemption_amount,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AdjustedCheckValues:
        """
        Rebuild from the payload shape produced by to_dict().

        Extra keys are ignored; a missing key raises KeyError.
        """
        return cls(
            spend_amount=data[SPEND_AMOUNT_KEY],
            tax_amount=data[TAX_AMOUNT_KEY],
            exemption_amount=data[EXEMPTION_AMOUNT_KEY],
        )

    def __repr__(self) -> str:
        return (
            f"AdjustedCheckValues(spend={self.spend_amount}, "
            f"tax={self.tax_amount}, exemption={self.exemption_amount})"
        )
