"""UPI (Unified Payments Interface) transfers."""

from costing.strategies._base import PaymentStrategy


class UpiPayment(PaymentStrategy):
    variant = "upi"
    label = "UPI"
