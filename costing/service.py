"""
Cost aggregation service.

CostService holds an ordered collection of strategies and treats them
uniformly: it never looks at the concrete variant, only at compute_cost()
and describe(). Rendering the results is left to costing.report.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Sequence

from costing.strategies import SHIPPING_STRATEGIES, CostStrategy, create_strategy

logger = logging.getLogger(__name__)


def _is_strategy(obj: object) -> bool:
    return callable(getattr(obj, "compute_cost", None)) and callable(
        getattr(obj, "describe", None)
    )


class DescriptionView:
    """
    Restartable view over a service's descriptions.

    Every iteration takes a fresh snapshot of the service, so strategies
    added after the view was created show up on the next pass.
    """

    def __init__(self, service: CostService):
        self._service = service

    def __iter__(self) -> Iterator[str]:
        for strategy in self._service.strategies:
            yield strategy.describe()

    def __len__(self) -> int:
        return len(self._service)

    def __repr__(self) -> str:
        return f"DescriptionView({len(self)} strategies)"


class CostService:
    """Ordered, append-only collection of cost strategies."""

    def __init__(self, strategies: Iterable[CostStrategy] = ()):
        self._strategies: list[CostStrategy] = []
        self._lock = threading.Lock()
        for strategy in strategies:
            self.add(strategy)

    def add(self, strategy: CostStrategy) -> None:
        """Append a strategy. Duplicates are kept."""
        if not _is_strategy(strategy):
            raise TypeError(
                f"Expected a cost strategy with compute_cost() and describe(), "
                f"got {type(strategy).__name__}"
            )
        with self._lock:
            self._strategies.append(strategy)
            count = len(self._strategies)
        logger.debug(f"Added {strategy!r} ({count} strategies)")

    @property
    def strategies(self) -> tuple[CostStrategy, ...]:
        """Snapshot of the current strategies in insertion order."""
        with self._lock:
            return tuple(self._strategies)

    def describe_all(self) -> DescriptionView:
        """Descriptions of every strategy, in insertion order."""
        return DescriptionView(self)

    def total_cost(self) -> float:
        """
        Sum of compute_cost() over all strategies.

        Evaluated on every call in insertion order; 0.0 when empty.
        """
        total = 0.0
        for strategy in self.strategies:
            total += strategy.compute_cost()
        logger.debug(f"Total cost over {len(self)} strategies: {total}")
        return total

    def __len__(self) -> int:
        with self._lock:
            return len(self._strategies)

    def __iter__(self) -> Iterator[CostStrategy]:
        return iter(self.strategies)

    def __repr__(self) -> str:
        return f"CostService({len(self)} strategies)"


# ---------------------------------------------------------------------------
# Strategy comparison
# ---------------------------------------------------------------------------

def compare_strategies(
    target: str,
    quantity: float,
    names: Sequence[str] | None = None,
) -> list[tuple[str, float]]:
    """
    Price the same input under several strategies, cheapest first.

    Args:
        target: Destination (shipping) or account (payment)
        quantity: Weight in kg or amount paid
        names: Strategy names to compare. Defaults to the shipping strategies.

    Returns:
        (name, cost) pairs sorted by cost; ties keep the order of `names`.
    """
    if names is None:
        names = SHIPPING_STRATEGIES
    quotes = [(name, create_strategy(name, target, quantity).compute_cost()) for name in names]
    quotes.sort(key=lambda q: q[1])  # stable: ties keep request order
    logger.info(f"Compared {len(quotes)} strategies for {target!r}")
    return quotes
