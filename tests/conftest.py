import pytest

from price_order import schemas


@pytest.fixture(autouse=True)
def clear_service_env(monkeypatch):
    for key in ["APP_HOST", "APP_PORT", "LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def free_shipping():
    return schemas.ShippingMethod(discount_threshold=None, discount_fee=0, fee_per_case=0)


@pytest.fixture
def undiscounted_product():
    return schemas.Product(base_price=10, discount_threshold=None, discount_rate=0.1)
