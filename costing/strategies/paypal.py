from costing.strategies._base import PaymentStrategy


class PaypalPayment(PaymentStrategy):
    variant = "paypal"
    label = "PayPal"
