"""Row-level behaviour of the cart endpoints."""
import pytest

from storefront.models.cart import CartItem
from storefront.models.log import Log

from tests.conftest import auth_headers, register


@pytest.fixture()
def ada(client):
    register(client, "ada@shop.io")
    return auth_headers(client, "ada@shop.io")


@pytest.fixture()
def bob(client):
    register(client, "bob@shop.io")
    return auth_headers(client, "bob@shop.io")


def add(client, headers, product_id, quantity=1):
    return client.post("/cart_items", json={"product_id": product_id, "quantity": quantity}, headers=headers)


class TestCartItems:
    def test_requires_identity(self, client, products):
        assert client.get("/cart_items").status_code == 401
        assert add(client, {}, products["pen"]).status_code == 401

    def test_insert_joins_product(self, client, products, ada):
        response = add(client, ada, products["pen"])
        assert response.status_code == 201

        lines = client.get("/cart_items", headers=ada).json()
        assert len(lines) == 1
        assert lines[0]["quantity"] == 1
        assert lines[0]["product"]["name"] == "Pen"

    def test_unknown_product(self, client, products, ada):
        assert add(client, ada, "nope").status_code == 404

    def test_out_of_stock_product(self, client, products, ada):
        response = add(client, ada, products["mug"])
        assert response.status_code == 409
        assert response.json()["detail"] == "Product out of stock"
        assert client.get("/cart_items", headers=ada).json() == []

    def test_one_line_per_user_and_product(self, client, products, ada):
        assert add(client, ada, products["pen"]).status_code == 201
        assert add(client, ada, products["pen"]).status_code == 409
        assert len(client.get("/cart_items", headers=ada).json()) == 1

    def test_same_product_in_two_carts(self, client, products, ada, bob):
        assert add(client, ada, products["pen"]).status_code == 201
        assert add(client, bob, products["pen"]).status_code == 201

    def test_quantity_must_be_positive(self, client, products, ada):
        line = add(client, ada, products["pen"]).json()
        response = client.patch(f"/cart_items/{line['id']}", json={"quantity": 0}, headers=ada)
        assert response.status_code == 422

    def test_update_quantity(self, client, products, ada):
        line = add(client, ada, products["pen"]).json()
        response = client.patch(f"/cart_items/{line['id']}", json={"quantity": 4}, headers=ada)
        assert response.status_code == 200
        assert response.json()["quantity"] == 4

    def test_cannot_touch_someone_elses_line(self, client, products, ada, bob, db):
        line = add(client, ada, products["pen"]).json()

        assert client.patch(f"/cart_items/{line['id']}", json={"quantity": 9}, headers=bob).status_code == 404
        assert client.delete(f"/cart_items/{line['id']}", headers=bob).status_code == 404
        assert client.get("/cart_items", headers=bob).json() == []

        row = db.query(CartItem).filter(CartItem.id == line["id"]).one()
        assert row.quantity == 1

    def test_delete_line(self, client, products, ada):
        line = add(client, ada, products["pen"]).json()
        assert client.delete(f"/cart_items/{line['id']}", headers=ada).status_code == 204
        assert client.get("/cart_items", headers=ada).json() == []

    def test_clear_only_removes_own_lines(self, client, products, ada, bob):
        add(client, ada, products["pen"])
        add(client, ada, products["notebook"])
        add(client, bob, products["pen"])

        assert client.delete("/cart_items", headers=ada).status_code == 204

        assert client.get("/cart_items", headers=ada).json() == []
        assert len(client.get("/cart_items", headers=bob).json()) == 1

    def test_mutations_are_audited(self, client, products, ada, db):
        add(client, ada, products["pen"])
        entry = db.query(Log).filter(Log.action == "CART_ADD").one()
        assert entry.resource == "cart"
        assert entry.meta["product_id"] == products["pen"]
