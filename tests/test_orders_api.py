"""Order endpoints: atomic insert, ownership and immutability."""
import pytest

from storefront.models.order import Order, OrderItem

from tests.conftest import ADDRESS, auth_headers, register


@pytest.fixture()
def ada(client):
    register(client, "ada@shop.io")
    return auth_headers(client, "ada@shop.io")


def order_payload(products, total="25.50"):
    return {
        "total_amount": total,
        "shipping_address": ADDRESS,
        "items": [
            {"product_id": products["notebook"], "quantity": 2, "price": "10.00"},
            {"product_id": products["pen"], "quantity": 1, "price": "5.50"},
        ],
    }


class TestCreateOrder:
    def test_order_and_lines_are_stored(self, client, products, ada):
        response = client.post("/orders", json=order_payload(products), headers=ada)
        assert response.status_code == 201
        data = response.json()

        assert data["status"] == "pending"
        assert data["total_amount"] == "25.50"
        assert data["payment_id"] is None
        assert data["shipping_address"] == ADDRESS
        assert len(data["items"]) == 2
        assert {it["product"]["name"] for it in data["items"]} == {"Notebook", "Pen"}

    def test_total_must_match_lines(self, client, products, ada, db):
        response = client.post("/orders", json=order_payload(products, total="30.00"), headers=ada)
        assert response.status_code == 422
        assert db.query(Order).count() == 0
        assert db.query(OrderItem).count() == 0

    def test_sub_cent_amounts_rejected(self, client, products, ada, db):
        payload = {
            "total_amount": "0.01",
            "shipping_address": ADDRESS,
            "items": [{"product_id": products["pen"], "quantity": 2, "price": "0.005"}],
        }
        assert client.post("/orders", json=payload, headers=ada).status_code == 422
        assert db.query(Order).count() == 0

    def test_price_must_match_catalog(self, client, products, ada, db):
        payload = {
            "total_amount": "0.00",
            "shipping_address": ADDRESS,
            "items": [{"product_id": products["notebook"], "quantity": 1, "price": "0.00"}],
        }
        response = client.post("/orders", json=payload, headers=ada)
        assert response.status_code == 409
        assert products["notebook"] in response.json()["detail"]
        assert db.query(Order).count() == 0

    def test_unknown_product_stores_nothing(self, client, products, ada, db):
        payload = order_payload(products)
        payload["items"][1]["product_id"] = "ghost"
        response = client.post("/orders", json=payload, headers=ada)
        assert response.status_code == 404
        assert db.query(Order).count() == 0

    def test_empty_order_rejected(self, client, products, ada):
        payload = {"total_amount": "0", "shipping_address": ADDRESS, "items": []}
        assert client.post("/orders", json=payload, headers=ada).status_code == 422

    def test_requires_identity(self, client, products):
        assert client.post("/orders", json=order_payload(products)).status_code == 401


class TestReadOrders:
    def test_newest_first(self, client, products, ada):
        first = client.post("/orders", json=order_payload(products), headers=ada).json()
        second = client.post("/orders", json=order_payload(products), headers=ada).json()

        ids = [o["id"] for o in client.get("/orders", headers=ada).json()]
        assert ids == [second["id"], first["id"]]

    def test_items_of_order(self, client, products, ada):
        order = client.post("/orders", json=order_payload(products), headers=ada).json()
        items = client.get(f"/orders/{order['id']}/items", headers=ada).json()
        assert sorted(it["quantity"] for it in items) == [1, 2]

    def test_other_users_orders_are_invisible(self, client, products, ada):
        order = client.post("/orders", json=order_payload(products), headers=ada).json()

        register(client, "bob@shop.io")
        bob = auth_headers(client, "bob@shop.io")
        assert client.get("/orders", headers=bob).json() == []
        assert client.get(f"/orders/{order['id']}", headers=bob).status_code == 404
        assert client.get(f"/orders/{order['id']}/items", headers=bob).status_code == 404

    def test_orders_cannot_be_modified(self, client, products, ada):
        order = client.post("/orders", json=order_payload(products), headers=ada).json()
        assert client.patch(f"/orders/{order['id']}", json={"status": "shipped"}, headers=ada).status_code == 405
        assert client.delete(f"/orders/{order['id']}", headers=ada).status_code == 405
