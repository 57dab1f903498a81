"""Configuration for cost strategies."""

import math
import os

from dotenv import load_dotenv

load_dotenv()


def _load_rate(env_key: str, default: float) -> float:
    """Read a non-negative number from the environment, falling back to default."""
    raw = os.environ.get(env_key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise EnvironmentError(
            f"Invalid value for {env_key}: {raw!r} (expected a number)"
        ) from None
    if not math.isfinite(value) or value < 0:
        raise EnvironmentError(
            f"Invalid value for {env_key}: {raw!r} (must be finite and >= 0)"
        )
    return value


# Shipping rates per kg (loaded from .env, defaults are the published tariff).
# Store pickup is always free and has no rate.
SHIPPING_RATES = {
    "standard": _load_rate("STANDARD_RATE_PER_KG", 15.0),
    "express": _load_rate("EXPRESS_RATE_PER_KG", 30.0),
}

# Payment surcharges as a percentage of the amount paid
PAYMENT_FEE_PCT = {
    "credit-card": _load_rate("CARD_FEE_PCT", 0.0),
    "paypal": _load_rate("PAYPAL_FEE_PCT", 0.0),
    "upi": _load_rate("UPI_FEE_PCT", 0.0),
    "netbanking": _load_rate("NETBANKING_FEE_PCT", 0.0),
}

CURRENCY_LABEL = os.environ.get("CURRENCY_LABEL", "Rs.")
