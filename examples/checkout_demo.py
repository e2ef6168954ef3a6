#!/usr/bin/env python3
"""
checkout_demo.py — Apportioning payments at the register

================================================================================
THE PROBLEM
================================================================================

A check totals 10.00, of which 1.00 is tax and 2.00 is exempt (for
example, items covered by a loyalty reward). Two guests pay 5.00 each.

How much of each payment is tax? How much is exempt?

Naively splitting tax and exemption pro rata gets both wrong: the order API
expects a partial payment to pay principal first, then tax, and the
exemption to land on whichever payment closes the check.

================================================================================
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pos_order import (
    compute_proposed_order_values,
    compute_complete_order_values,
)


def demonstrate_scenarios():
    """Single-payment cases."""
    print("=" * 60)
    print("SINGLE PAYMENTS")
    print("=" * 60)
    print()
    
    cases = [
        ("full payment", (1000, 100, 0, 1000)),
        ("partial payment", (1000, 100, 0, 950)),
        ("full payment with exemption", (1000, 100, 200, 1000)),
        ("overpayment", (1000, 100, 200, 5000)),
        ("negative payment", (1000, 100, 200, -50)),
    ]
    
    for label, args in cases:
        values = compute_proposed_order_values(*args)
        print(f"  {label:28s} {args} -> {values}")
    print()


def demonstrate_split_check():
    """Several guests paying the same check in turn."""
    print("=" * 60)
    print("SPLIT CHECK")
    print("=" * 60)
    print()
    
    outstanding, tax, exemption = 1000, 100, 200
    print(f"Check: outstanding={outstanding} tax={tax} exemption={exemption}")
    print()
    
    for guest, payment in enumerate([300, 300, 400], 1):
        values = compute_proposed_order_values(outstanding, tax, exemption, payment)
        print(f"  Guest {guest} pays {payment:4d} -> {values}")
        
        outstanding -= values.spend_amount
        tax -= values.tax_amount
        exemption -= values.exemption_amount
    
    print()
    print(f"Remaining: outstanding={outstanding} tax={tax} exemption={exemption}")
    print()


def demonstrate_complete_order():
    """Discount already applied at the register."""
    print("=" * 60)
    print("COMPLETE ORDER WITH DISCOUNT")
    print("=" * 60)
    print()
    
    # 10.00 check, 2.00 discount applied -> 8.00 outstanding
    values = compute_complete_order_values(800, 80, 0, 1000, -200)
    print(f"  outstanding=800 discount=-200 payment=1000 -> {values}")
    print()
    print(f"Payload: {values.to_dict()}")
    print()


def main():
    """Run all demonstrations."""
    demonstrate_scenarios()
    demonstrate_split_check()
    demonstrate_complete_order()


if __name__ == "__main__":
    main()
