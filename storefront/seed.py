# storefront/seed.py
"""Loads the sample catalog into the configured database.

Run with ``python -m storefront.seed``. Products already present (matched by
name) are left untouched.
"""
import logging
from decimal import Decimal

from storefront.database import SessionLocal, init_db
from storefront.models.product import Product

logger = logging.getLogger(__name__)

IMAGE_BASE = "https://images.pexels.com/photos"

SAMPLE_PRODUCTS = [
    ("Wireless Headphones", "Premium noise-cancelling headphones with 30-hour battery life",
     "199.99", "3394650/pexels-photo-3394650.jpeg", "Electronics", 50),
    ("Smart Watch", "Fitness tracking smartwatch with heart rate monitor",
     "299.99", "437037/pexels-photo-437037.jpeg", "Electronics", 35),
    ("Laptop Backpack", "Durable water-resistant backpack with laptop compartment",
     "79.99", "2905238/pexels-photo-2905238.jpeg", "Accessories", 100),
    ("Coffee Maker", "Programmable coffee maker with thermal carafe",
     "89.99", "324028/pexels-photo-324028.jpeg", "Home", 45),
    ("Running Shoes", "Lightweight running shoes with cushioned sole",
     "129.99", "2529148/pexels-photo-2529148.jpeg", "Fashion", 80),
    ("Desk Lamp", "LED desk lamp with adjustable brightness and color",
     "49.99", "1112598/pexels-photo-1112598.jpeg", "Home", 60),
    ("Bluetooth Speaker", "Portable waterproof speaker with 360-degree sound",
     "149.99", "1279406/pexels-photo-1279406.jpeg", "Electronics", 70),
    ("Yoga Mat", "Non-slip eco-friendly yoga mat with carrying strap",
     "39.99", "3822356/pexels-photo-3822356.jpeg", "Fitness", 120),
]


def seed_products(session) -> int:
    existing = {name for (name,) in session.query(Product.name).all()}
    added = 0
    for name, description, price, image, category, stock in SAMPLE_PRODUCTS:
        if name in existing:
            continue
        session.add(Product(
            name=name,
            description=description,
            price=Decimal(price),
            image_url=f"{IMAGE_BASE}/{image}?auto=compress&cs=tinysrgb&w=800",
            category=category,
            stock=stock,
        ))
        added += 1
    session.commit()
    return added


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    session = SessionLocal()
    try:
        added = seed_products(session)
        logger.info(f"Seeded {added} products")
    finally:
        session.close()


if __name__ == "__main__":
    main()
