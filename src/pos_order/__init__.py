"""
pos_order — Payment apportioning for point-of-sale checkout

Given a check's outstanding balance, tax and exemptions, and what the
customer wants to pay, compute the spend, tax and exemption amounts to
submit to the order API. All amounts are integer cents.

================================================================================
QUICK START
================================================================================

Proposed order (payment not yet captured):

    from pos_order import compute_proposed_order_values

    values = compute_proposed_order_values(
        total_outstanding_amount=1000,
        total_tax_amount=100,
        total_exemption_amount=0,
        customer_payment_amount=950,
    )
    # values.spend_amount == 950, values.tax_amount == 50

Complete order (a discount has already been applied at the register):

    from pos_order import compute_complete_order_values

    values = compute_complete_order_values(800, 80, 0, 1000, -200)
    # values.spend_amount == 1000  (800 owed + 200 discount)

    payload = values.to_dict()
    # {"spend_amount": 1000, "tax_amount": 80, "exemption_amount": 0}

================================================================================
"""

from .values import AdjustedCheckValues

from .calculator import (
    compute_proposed_order_values,
    compute_complete_order_values,
    adjusted_customer_payment_amount,
    adjusted_tax_amount,
    adjusted_exemption_amount,
    adjusted_spend_amount_complete_order,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Values
    "AdjustedCheckValues",
    # Entry points
    "compute_proposed_order_values",
    "compute_complete_order_values",
    # Adjustments
    "adjusted_customer_payment_amount",
    "adjusted_tax_amount",
    "adjusted_exemption_amount",
    "adjusted_spend_amount_complete_order",
]
