"""
Shared pytest fixtures — fresh in‑memory store + FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from receipt_points.main import app
from receipt_points.schemas import Receipt
from receipt_points.store import ReceiptStore, get_store


def _build_receipt(**overrides) -> Receipt:
    data = {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [{"shortDescription": "Pepsi - 12-oz", "price": "1.25"}],
        "total": "1.25",
    }
    data.update(overrides)
    return Receipt.model_validate(data)


@pytest.fixture()
def make_receipt():
    """Build a valid receipt, overriding any wire field by name."""
    return _build_receipt


@pytest.fixture()
def store():
    return ReceiptStore()


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
