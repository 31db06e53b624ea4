"""
Tests for the /orders endpoints.

Run with:
    pytest tests/web/test_order_endpoints.py -v
"""

import logging
import re

import pytest

import config

UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")

ORDER_PAYLOAD = {
    "items": [
        {"productId": 1, "size": "m", "additives": ["Sugar", "Cinnamon"], "quantity": 2},
        {"productId": 9, "size": "s", "additives": [], "quantity": 1},
    ],
    "totalPrice": 19.5,
}


async def register_and_get_token(client, register_payload) -> str:
    response = await client.post("/auth/register", json=register_payload)
    return response.json()["data"]["access_token"]


class TestConfirmOrder:
    """Test POST /orders/confirm"""

    @pytest.mark.asyncio
    async def test_anonymous_order_confirmed(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="services.order"):
            response = await client.post("/orders/confirm", json=ORDER_PAYLOAD)

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["message"] == "Your order is confirmed"
        assert UUID_PATTERN.match(data["orderId"])
        assert "Anonymous" in caplog.text

    @pytest.mark.asyncio
    async def test_empty_items_accepted(self, client):
        response = await client.post("/orders/confirm", json={"items": [], "totalPrice": 0})

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_each_confirmation_gets_distinct_id(self, client):
        order_ids = set()
        for _ in range(5):
            response = await client.post("/orders/confirm", json=ORDER_PAYLOAD)
            order_ids.add(response.json()["data"]["orderId"])

        assert len(order_ids) == 5

    @pytest.mark.asyncio
    async def test_order_attributed_to_authenticated_user(self, client, register_payload, caplog):
        token = await register_and_get_token(client, register_payload)

        with caplog.at_level(logging.INFO, logger="services.order"):
            response = await client.post(
                "/orders/confirm", json=ORDER_PAYLOAD, headers={"Authorization": f"Bearer {token}"}
            )

        assert response.status_code == 201
        assert "john123" in caplog.text

    @pytest.mark.asyncio
    async def test_invalid_token_falls_back_to_anonymous(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="services.order"):
            response = await client.post(
                "/orders/confirm", json=ORDER_PAYLOAD, headers={"Authorization": "Bearer garbage"}
            )

        assert response.status_code == 201
        assert "Anonymous" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"items": [{"productId": 1, "size": "m", "additives": [], "quantity": 0}], "totalPrice": 5},
        {"items": [], "totalPrice": -1},
        {"items": []},
        {"items": [], "totalPrice": 5, "coupon": "FREE"},
        {"items": [{"productId": 1, "size": "m", "additives": [], "quantity": 1, "note": "x"}], "totalPrice": 5},
        {"items": [], "total_price": 5},
        {"items": [{"product_id": 1, "size": "m", "additives": [], "quantity": 1}], "totalPrice": 5},
        {"items": [{"productId": 1, "size": "m", "additives": [], "quantity": 1.0}], "totalPrice": 5},
        {"items": [{"productId": "1", "size": "m", "additives": [], "quantity": 1}], "totalPrice": 5},
        {"items": [], "totalPrice": "15"},
    ])
    async def test_invalid_body_returns_400(self, payload, client):
        response = await client.post("/orders/confirm", json=payload)

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_simulated_error_is_flagged(self, client, monkeypatch):
        monkeypatch.setattr(config, "ERROR_SIMULATION_PROBABILITY", 1.0)

        response = await client.post("/orders/confirm", json=ORDER_PAYLOAD)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Simulated API error for testing purposes"
        assert body["isTestError"] is True
        assert "timestamp" in body

    @pytest.mark.asyncio
    async def test_service_failure_returns_generic_500(self, client, monkeypatch):
        from services.order import OrderService

        async def broken(order_dto, user=None):
            raise RuntimeError("logging backend unavailable")

        monkeypatch.setattr(OrderService, "confirm_order", broken)

        response = await client.post("/orders/confirm", json=ORDER_PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to confirm order"}


class TestConfirmOrderAuthenticated:
    """Test POST /orders/confirm-auth"""

    @pytest.mark.asyncio
    async def test_requires_token(self, client):
        response = await client.post("/orders/confirm-auth", json=ORDER_PAYLOAD)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    @pytest.mark.asyncio
    async def test_rejects_invalid_token(self, client):
        response = await client.post(
            "/orders/confirm-auth", json=ORDER_PAYLOAD, headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_confirms_with_valid_token(self, client, register_payload):
        token = await register_and_get_token(client, register_payload)

        response = await client.post(
            "/orders/confirm-auth", json=ORDER_PAYLOAD, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 201
        assert UUID_PATTERN.match(response.json()["data"]["orderId"])
