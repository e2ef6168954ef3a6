"""
calculator.py — Apportioning a payment across spend, tax and exemption

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTEGER CENTS
   Every amount is an int count of cents. No floating point anywhere.

2. TOTAL FUNCTIONS
   Nothing here raises. Out-of-range inputs (negative payments, payments
   above the balance, tax above the balance, signed discounts) are
   saturated into range, never rejected.

3. FIXED EVALUATION ORDER
   payment -> tax -> exemption. The tax step needs the adjusted payment;
   the exemption step needs the adjusted payment and the check's tax.

4. PARTIAL PAYMENT ORDERING
   A partial payment pays principal first, then tax. Exemptions are
   deferred to the last paying customer(s).

================================================================================
EXAMPLE
================================================================================

    check: outstanding=1000, tax=100, exemption=200

    guest A pays 500  -> spend=500, tax=0,   exemption=0
    guest B pays 500  -> spend=500, tax=100, exemption=200

    The exemption lands entirely on the payment that closes the check.

================================================================================
"""

from __future__ import annotations
import logging

from .values import AdjustedCheckValues


logger = logging.getLogger(__name__)


def _clamp(value: int, upper: int) -> int:
    """min(value, upper), then floored at zero."""
    return max(0, min(value, upper))


# ==============================================================================
# ENTRY POINTS
# ==============================================================================

def _proposed_order_values(
    total_outstanding_amount: int,
    total_tax_amount: int,
    total_exemption_amount: int,
    customer_payment_amount: int,
) -> AdjustedCheckValues:
    spend_amount = adjusted_customer_payment_amount(
        total_outstanding_amount, customer_payment_amount
    )
    tax_amount = adjusted_tax_amount(
        total_outstanding_amount, total_tax_amount, spend_amount
    )
    exemption_amount = adjusted_exemption_amount(
        total_outstanding_amount,
        total_tax_amount,
        total_exemption_amount,
        spend_amount,
    )
    return AdjustedCheckValues(spend_amount, tax_amount, exemption_amount)


def compute_proposed_order_values(
    total_outstanding_amount: int,
    total_tax_amount: int,
    total_exemption_amount: int,
    customer_payment_amount: int,
) -> AdjustedCheckValues:
    """
    Values to submit with a create-proposed-order request.

    Args:
        total_outstanding_amount: current total of the check, tax included
        total_tax_amount: current tax due on the check
        total_exemption_amount: current total of exempted items on the check
        customer_payment_amount: what the customer would like to spend

    Returns:
        AdjustedCheckValues with spend, tax and exemption in cents
    """
    values = _proposed_order_values(
        total_outstanding_amount,
        total_tax_amount,
        total_exemption_amount,
        customer_payment_amount,
    )

    logger.debug(
        "proposed order: outstanding=%d tax=%d exemption=%d payment=%d "
        "-> spend=%d tax=%d exemption=%d",
        total_outstanding_amount,
        total_tax_amount,
        total_exemption_amount,
        customer_payment_amount,
        values.spend_amount,
        values.tax_amount,
        values.exemption_amount,
    )
    return values


def compute_complete_order_values(
    total_outstanding_amount: int,
    total_tax_amount: int,
    total_exemption_amount: int,
    customer_payment_amount: int,
    applied_discount_amount: int,
) -> AdjustedCheckValues:
    """
    Values to submit with a complete-order request.

    Tax and exemption are the proposed-order values; spend is recomputed
    against the pre-discount balance (see adjusted_spend_amount_complete_order).

    Args:
        applied_discount_amount: discount already applied at the point of
            sale. Sign is not assumed, the absolute value is used.
    """
    values = _proposed_order_values(
        total_outstanding_amount,
        total_tax_amount,
        total_exemption_amount,
        customer_payment_amount,
    )
    values.spend_amount = adjusted_spend_amount_complete_order(
        total_outstanding_amount,
        customer_payment_amount,
        applied_discount_amount,
    )

    logger.debug(
        "complete order: outstanding=%d tax=%d exemption=%d payment=%d "
        "discount=%d -> spend=%d tax=%d exemption=%d",
        total_outstanding_amount,
        total_tax_amount,
        total_exemption_amount,
        customer_payment_amount,
        applied_discount_amount,
        values.spend_amount,
        values.tax_amount,
        values.exemption_amount,
    )
    return values


# ==============================================================================
# ADJUSTMENTS
# ==============================================================================

def adjusted_customer_payment_amount(
    total_outstanding_amount: int,
    customer_payment_amount: int,
) -> int:
    """The part of the requested payment that actually applies to the check."""
    return _clamp(customer_payment_amount, total_outstanding_amount)


def adjusted_tax_amount(
    total_outstanding_amount: int,
    total_tax_amount: int,
    adjusted_payment_amount: int,
) -> int:
    """
    Tax covered by this payment.

    The shortfall of a partial payment comes off the principal first: tax
    is reduced only by whatever shortfall the principal cannot absorb.
    A full payment covers all the (clamped) tax.
    """
    tax = _clamp(total_tax_amount, total_outstanding_amount)

    if adjusted_payment_amount < total_outstanding_amount:
        shortfall = total_outstanding_amount - adjusted_payment_amount
        tax = max(0, tax - shortfall)

    return tax


def adjusted_exemption_amount(
    total_outstanding_amount: int,
    total_tax_amount: int,
    total_exemption_amount: int,
    adjusted_payment_amount: int,
) -> int:
    """
    Exemption covered by this payment.

    Exemptions are deferred to the last payment(s) on the check: while the
    payment leaves part of the subtotal (outstanding less tax) uncovered,
    the exemption shrinks by that uncovered part.
    """
    subtotal = total_outstanding_amount - total_tax_amount
    exemption = total_exemption_amount

    if adjusted_payment_amount < subtotal:
        uncovered = max(0, subtotal - adjusted_payment_amount)
        exemption = max(0, exemption - uncovered)

    exemption = min(min(exemption, subtotal), adjusted_payment_amount)
    return max(0, exemption)


def adjusted_spend_amount_complete_order(
    total_outstanding_amount: int,
    customer_spend_amount: int,
    applied_discount_amount: int,
) -> int:
    """
    Spend for a complete-order request.

    Knowing what is owed now and the discount already applied gives what was
    originally owed: outstanding + |discount|. The customer never pays more
    than that, nor more than they asked to spend.
    """
    theoretical_outstanding = total_outstanding_amount + abs(applied_discount_amount)
    return _clamp(customer_spend_amount, theoretical_outstanding)
