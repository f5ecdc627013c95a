from storefront.models.product import Product
from storefront.seed import SAMPLE_PRODUCTS, seed_products


def test_seed_is_idempotent(db):
    assert seed_products(db) == len(SAMPLE_PRODUCTS)
    assert seed_products(db) == 0
    assert db.query(Product).count() == len(SAMPLE_PRODUCTS)

    categories = {category for (category,) in db.query(Product.category).distinct()}
    assert categories == {"Electronics", "Accessories", "Home", "Fashion", "Fitness"}
