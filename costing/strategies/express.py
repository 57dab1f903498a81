"""Express shipping: faster delivery at twice the standard per-kg rate."""

from costing.strategies._base import ShippingStrategy


class ExpressShipping(ShippingStrategy):
    variant = "express"
    label = "Express Shipping"
