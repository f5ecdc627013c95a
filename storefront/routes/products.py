# storefront/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from storefront.database import get_db
from storefront.models.product import Product
from storefront.schemas.product import ProductOut

# Catalog is publicly readable: no identity required on any route here
router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    category: Optional[str] = Query(None, description="Exact category match"),
    q: Optional[str] = Query(None, description="Search in name or description"),
    db: Session = Depends(get_db),
):
    query = db.query(Product)

    if category:
        query = query.filter(Product.category == category)

    if q:
        like = f"%{q.strip()}%"
        query = query.filter(
            or_(
                Product.name.ilike(like),
                Product.description.ilike(like),
            )
        )

    return query.order_by(Product.name.asc()).all()


# Retrieve unique product categories
@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    categories = db.query(Product.category).distinct().order_by(Product.category).all()
    return [c[0] for c in categories]


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
