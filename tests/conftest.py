import pytest

from costing.service import CostService
from costing.strategies.express import ExpressShipping
from costing.strategies.pickup import StorePickup
from costing.strategies.standard import StandardShipping


@pytest.fixture
def shipments() -> list:
    """The four parcels from the reference order."""
    return [
        StandardShipping("Delhi", 12),
        StandardShipping("Banglore", 7),
        ExpressShipping("Pune", 4),
        StorePickup("Mumbai", 12),
    ]


@pytest.fixture
def service(shipments) -> CostService:
    svc = CostService()
    for s in shipments:
        svc.add(s)
    return svc
