import asyncio
from decimal import Decimal

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.client import Storefront
from storefront.database import get_db, init_db
from storefront.main import create_app
from storefront.models.product import Product

PASSWORD = "correct-horse"

ADDRESS = {
    "name": "Ada Lovelace",
    "address": "12 Analytical Row",
    "city": "London",
    "state": "LDN",
    "zip": "N1 9GU",
    "country": "UK",
}


def run(coro):
    return asyncio.run(coro)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture()
def app(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def products(db):
    rows = {
        "notebook": Product(name="Notebook", description="Dotted A5 notebook", price=Decimal("10.00"),
                            image_url="https://img.example/notebook.jpg", category="Stationery", stock=20),
        "pen": Product(name="Pen", description="Smooth gel pen", price=Decimal("5.50"),
                       image_url="https://img.example/pen.jpg", category="Stationery", stock=5),
        "mug": Product(name="Mug", description="Ceramic Coffee mug", price=Decimal("7.25"),
                       image_url="https://img.example/mug.jpg", category="Home", stock=0),
    }
    db.add_all(rows.values())
    db.commit()
    return {key: product.id for key, product in rows.items()}


def register(client, email, password=PASSWORD):
    response = client.post("/register", json={"email": email, "password": password, "full_name": email.split("@")[0]})
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(client, email, password=PASSWORD):
    response = client.post("/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def make_shop(app):
    """Builds a client-side Storefront talking to the in-process app.

    Must be called inside the coroutine that uses it.
    """
    def _make():
        return Storefront(base_url="http://testserver", transport=httpx.ASGITransport(app=app))
    return _make
