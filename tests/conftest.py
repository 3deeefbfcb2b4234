import pytest
from fastapi.testclient import TestClient

from turf_api.config import Settings
from turf_api.main import create_app
from turf_api.payment.razorpay_client import get_razorpay_client


class FakeOrders:
    def __init__(self, response=None, error=None):
        self.calls = []
        self.response = response
        self.error = error

    def create(self, data):
        self.calls.append(data)
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response
        return {
            "id": "order_test_123",
            "entity": "order",
            "amount": data["amount"],
            "currency": data["currency"],
            "receipt": data["receipt"],
            "status": "created",
            "notes": data.get("notes", {}),
        }


class FakeRazorpayClient:
    def __init__(self, **kwargs):
        self.order = FakeOrders(**kwargs)


@pytest.fixture
def settings():
    return Settings(
        razorpay_key_id="rzp_test_key",
        razorpay_key_secret="rzp_test_secret",
        frontend_origin="http://localhost:3000",
        environment="test",
    )


@pytest.fixture
def fake_client():
    return FakeRazorpayClient()


def make_test_client(settings, fake_client):
    app = create_app(settings)
    app.dependency_overrides[get_razorpay_client] = lambda: fake_client
    return TestClient(app)


@pytest.fixture
def client(settings, fake_client):
    with make_test_client(settings, fake_client) as test_client:
        yield test_client
