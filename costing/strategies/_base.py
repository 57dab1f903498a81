"""
Base classes shared by the cost strategies.

A strategy binds one immutable input to one pricing rule. compute_cost() and
describe() are pure: they read only the bound input and the rate captured
from config when the strategy was built.
"""

from abc import ABC, abstractmethod

from costing import config
from costing.models import PaymentInput, ShipmentInput


class CostStrategy(ABC):
    """Contract every cost strategy implements."""

    variant: str = ""
    label: str = ""

    @abstractmethod
    def compute_cost(self) -> float:
        """Return the non-negative cost of this strategy's input."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line human-readable description."""


class ShippingStrategy(CostStrategy):
    """Per-kg shipping rule. Subclasses set variant and label."""

    def __init__(self, destination: str, weight: float):
        self.shipment = ShipmentInput(destination, weight)
        # rate and label are fixed for the lifetime of the instance
        self._rate = self._lookup_rate()
        self._currency = config.CURRENCY_LABEL

    def _lookup_rate(self) -> float:
        return config.SHIPPING_RATES[self.variant]

    @property
    def destination(self) -> str:
        return self.shipment.destination

    @property
    def weight(self) -> float:
        return self.shipment.weight

    @property
    def rate(self) -> float:
        return self._rate

    def compute_cost(self) -> float:
        return self.weight * self.rate

    def describe(self) -> str:
        return (
            f"{self.label} to {self.destination}: {self.weight} kg, "
            f"{self.compute_cost()} {self._currency}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(destination={self.destination!r}, "
            f"weight={self.weight!r})"
        )


class PaymentStrategy(CostStrategy):
    """Payment method rule: the amount plus the method's surcharge."""

    def __init__(self, account: str, amount: float):
        self.payment = PaymentInput(account, amount)
        self._fee_pct = config.PAYMENT_FEE_PCT[self.variant]
        self._currency = config.CURRENCY_LABEL

    @property
    def account(self) -> str:
        return self.payment.account

    @property
    def amount(self) -> float:
        return self.payment.amount

    @property
    def fee_pct(self) -> float:
        return self._fee_pct

    def compute_cost(self) -> float:
        fee_pct = self.fee_pct
        if fee_pct == 0:
            return self.amount
        return self.amount * (1 + fee_pct / 100)

    def describe(self) -> str:
        return (
            f"Paid {self._currency} {self.compute_cost()} "
            f"using {self.label} ({self.account})"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(account={self.account!r}, "
            f"amount={self.amount!r})"
        )
