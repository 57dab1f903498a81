"""Standard shipping: the cheapest delivered option, billed per kg."""

from costing.strategies._base import ShippingStrategy


class StandardShipping(ShippingStrategy):
    variant = "standard"
    label = "Standard Shipping"
