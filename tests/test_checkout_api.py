"""Tests for `POST /api/check-out` and the payment provider client."""

from urllib.parse import parse_qs

import httpx
import pytest

from services import checkout_service
from services.payment_provider import PaymentProviderClient

BODY = {"userId": "user_1", "planType": "pro", "email": "jane@example.com"}


class ProcessorStub:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {"id": "cs_test_1", "url": "https://pay.example/abc"}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture()
def processor(monkeypatch):
    stub = ProcessorStub()
    monkeypatch.setenv("CHECKOUT_API_KEY", "sk_test_demo")
    monkeypatch.setenv("CHECKOUT_PRICE_PRO", "price_pro_monthly")
    monkeypatch.setenv("CHECKOUT_PRICE_PREMIUM", "price_premium_yearly")
    monkeypatch.setattr(
        checkout_service,
        "get_payment_provider_client",
        lambda: PaymentProviderClient(
            api_key="sk_test_demo",
            base_url="https://processor.test",
            transport=httpx.MockTransport(stub),
        ),
    )
    return stub


def test_returns_checkout_url(client, processor):
    res = client.post("/api/check-out", json=BODY)
    assert res.status_code == 200
    assert res.json() == {"url": "https://pay.example/abc"}

    assert len(processor.requests) == 1
    request = processor.requests[0]
    assert request.url.path == "/v1/checkout/sessions"
    assert request.headers["Authorization"] == "Bearer sk_test_demo"
    form = parse_qs(request.content.decode())
    assert form["line_items[0][price]"] == ["price_pro_monthly"]
    assert form["customer_email"] == ["jane@example.com"]
    assert form["client_reference_id"] == ["user_1"]
    assert form["metadata[planType]"] == ["pro"]
    assert form["mode"] == ["subscription"]


def test_plan_type_is_case_insensitive(client, processor):
    res = client.post("/api/check-out", json={**BODY, "planType": "Premium"})
    assert res.status_code == 200
    form = parse_qs(processor.requests[0].content.decode())
    assert form["line_items[0][price]"] == ["price_premium_yearly"]


def test_free_plan_is_rejected(client, processor):
    res = client.post("/api/check-out", json={**BODY, "planType": "free"})
    assert res.status_code == 400
    assert "Free plan" in res.json()["message"]
    assert processor.requests == []


def test_unknown_plan_is_404(client, processor):
    res = client.post("/api/check-out", json={**BODY, "planType": "platinum"})
    assert res.status_code == 404
    assert "platinum" in res.json()["message"]


def test_processor_error_message_is_forwarded(client, processor):
    processor.status_code = 402
    processor.body = {"error": {"message": "Your card was declined.", "type": "card_error"}}
    res = client.post("/api/check-out", json=BODY)
    assert res.status_code == 502
    assert res.json()["message"] == "Your card was declined."


def test_missing_price_is_configuration_error(client, processor, monkeypatch):
    monkeypatch.delenv("CHECKOUT_PRICE_PRO")
    res = client.post("/api/check-out", json=BODY)
    assert res.status_code == 500
    assert res.json()["error"] == "No price configured for plan 'pro'"
    assert processor.requests == []


def test_missing_fields_fail_validation(client, processor):
    res = client.post("/api/check-out", json={"planType": "pro"})
    assert res.status_code == 422


def test_missing_api_key_is_configuration_error(monkeypatch):
    from core.exceptions import ConfigurationError
    from services.payment_provider import get_payment_provider_client

    monkeypatch.delenv("CHECKOUT_API_KEY", raising=False)
    with pytest.raises(ConfigurationError) as exc_info:
        get_payment_provider_client()
    assert exc_info.value.details == {"config_key": "CHECKOUT_API_KEY"}
