"""
Pluggable cost strategies.

A strategy is a CostStrategy subclass bound to one immutable input. The
aggregator in costing.service only relies on compute_cost() and describe(),
so new variants register here without touching it.
"""

import importlib
import logging

from costing.strategies._base import CostStrategy, PaymentStrategy, ShippingStrategy

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, tuple[str, str]] = {
    # name -> (module_path, class_name), imported on first lookup
    "standard": ("costing.strategies.standard", "StandardShipping"),
    "express": ("costing.strategies.express", "ExpressShipping"),
    "pickup": ("costing.strategies.pickup", "StorePickup"),
    "credit-card": ("costing.strategies.credit_card", "CreditCardPayment"),
    "paypal": ("costing.strategies.paypal", "PaypalPayment"),
    "upi": ("costing.strategies.upi", "UpiPayment"),
    "netbanking": ("costing.strategies.netbanking", "NetBankingPayment"),
}

SHIPPING_STRATEGIES = ("standard", "express", "pickup")
PAYMENT_STRATEGIES = ("credit-card", "paypal", "upi", "netbanking")

DEFAULT_STRATEGY = "standard"


def get_strategy(name: str) -> type[CostStrategy]:
    """Look up a strategy class by name, importing its module lazily."""
    if name not in _REGISTRY:
        available = ", ".join(_REGISTRY.keys())
        raise ValueError(f"Unknown strategy: {name!r}. Available: {available}")
    module_path, class_name = _REGISTRY[name]
    mod = importlib.import_module(module_path)
    logger.debug(f"Resolved strategy {name!r} to {module_path}.{class_name}")
    return getattr(mod, class_name)


def list_strategies() -> list[str]:
    return list(_REGISTRY.keys())


def create_strategy(name: str, target: str, quantity: float) -> CostStrategy:
    """
    Build a strategy instance by name.

    target is the destination (shipping) or account (payment); quantity is the
    weight in kg or the amount paid. Raises InvalidInput for bad inputs.
    """
    return get_strategy(name)(target, quantity)


__all__ = [
    "CostStrategy",
    "DEFAULT_STRATEGY",
    "PAYMENT_STRATEGIES",
    "PaymentStrategy",
    "SHIPPING_STRATEGIES",
    "ShippingStrategy",
    "create_strategy",
    "get_strategy",
    "list_strategies",
]
