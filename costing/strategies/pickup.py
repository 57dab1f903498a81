"""
Store pickup.

The customer collects the parcel in store, so there is nothing to bill
regardless of weight. The weight is still validated and reported.
"""

from costing.strategies._base import ShippingStrategy


class StorePickup(ShippingStrategy):
    variant = "pickup"
    label = "Store Pickup"

    def _lookup_rate(self) -> float:
        return 0.0
