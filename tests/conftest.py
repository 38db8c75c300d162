import pytest

from django.apps import apps
from rest_framework.test import APIClient

from modules.orders.services import build_order_service


@pytest.fixture(autouse=True)
def _fresh_order_registry():
    """Give every test an empty registry and a sequence starting at 1."""
    apps.get_app_config("orders").order_service = build_order_service()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def order_payload():
    """A creation body that passes every structural and business rule."""
    return {
        "userId": "user-1",
        "items": [{"productId": "PROD-001", "quantity": 2}],
        "deliveryAddress": "Seoul",
    }
