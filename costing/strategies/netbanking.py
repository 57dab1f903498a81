from costing.strategies._base import PaymentStrategy


class NetBankingPayment(PaymentStrategy):
    variant = "netbanking"
    label = "Net Banking"
