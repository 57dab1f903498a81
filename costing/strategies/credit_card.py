"""Credit card payments (surcharge from CARD_FEE_PCT)."""

from costing.strategies._base import PaymentStrategy


class CreditCardPayment(PaymentStrategy):
    variant = "credit-card"
    label = "Credit Card"
