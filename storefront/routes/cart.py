# storefront/routes/cart.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from storefront.database import get_db
from storefront.models.cart import CartItem
from storefront.models.product import Product
from storefront.models.users import User
from storefront.schemas.cart import CartItemCreate, CartItemOut, CartItemUpdate
from storefront.utils.audit import client_ip, write_log
from storefront.utils.tokenJWT import get_current_user

router = APIRouter(prefix="/cart_items", tags=["Cart"])


def _own_items(db: Session, user: User):
    # Row-level policy: a caller only ever sees its own cart lines
    return db.query(CartItem).filter(CartItem.user_id == user.id)


def _get_own_item(db: Session, user: User, item_id: str) -> CartItem:
    item = _own_items(db, user).filter(CartItem.id == item_id).first()
    if not item:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return item


@router.get("", response_model=List[CartItemOut])
def list_cart_items(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        _own_items(db, current_user)
        .options(joinedload(CartItem.product))
        .order_by(CartItem.created_at.asc())
        .all()
    )


@router.post("", response_model=CartItemOut, status_code=status.HTTP_201_CREATED)
def create_cart_item(
    payload: CartItemCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    product = db.query(Product).filter(Product.id == payload.product_id).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    # Out-of-stock products cannot be put in a cart
    if product.stock == 0:
        raise HTTPException(status_code=409, detail="Product out of stock")

    item = CartItem(user_id=current_user.id, product_id=product.id, quantity=payload.quantity)
    db.add(item)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Product already in cart")
    db.refresh(item)
    out = CartItemOut.model_validate(item)

    write_log(
        db,
        user_id=current_user.id,
        action="CART_ADD",
        resource="cart",
        ip=client_ip(request),
        meta={"product_id": product.id, "quantity": payload.quantity},
    )
    return out


@router.patch("/{item_id}", response_model=CartItemOut)
def update_cart_item(
    item_id: str,
    payload: CartItemUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    item = _get_own_item(db, current_user, item_id)
    item.quantity = payload.quantity
    db.commit()
    db.refresh(item)
    out = CartItemOut.model_validate(item)

    write_log(
        db,
        user_id=current_user.id,
        action="CART_UPDATE",
        resource="cart",
        ip=client_ip(request),
        meta={"item_id": item_id, "quantity": payload.quantity},
    )
    return out


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cart_item(
    item_id: str,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    item = _get_own_item(db, current_user, item_id)
    db.delete(item)
    db.commit()

    write_log(
        db,
        user_id=current_user.id,
        action="CART_DELETE",
        resource="cart",
        ip=client_ip(request),
        meta={"item_id": item_id},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart_items(
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted = _own_items(db, current_user).delete(synchronize_session=False)
    db.commit()

    write_log(
        db,
        user_id=current_user.id,
        action="CART_CLEAR",
        resource="cart",
        ip=client_ip(request),
        meta={"deleted": deleted},
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
