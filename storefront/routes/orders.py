# storefront/routes/orders.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from storefront.database import get_db
from storefront.models.order import Order, OrderItem
from storefront.models.product import Product
from storefront.models.users import User
from storefront.schemas.order import OrderCreate, OrderDetail, OrderItemOut, OrderOut
from storefront.utils.audit import client_ip, write_log
from storefront.utils.tokenJWT import get_current_user

# Orders are insert-only: there are deliberately no PATCH/DELETE routes
router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger(__name__)


def _get_own_order(db: Session, user: User, order_id: str) -> Order:
    order = db.query(Order).filter(Order.id == order_id, Order.user_id == user.id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


# List the caller's orders, newest first
@router.get("", response_model=List[OrderOut])
def list_my_orders(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return (
        db.query(Order)
        .filter(Order.user_id == current_user.id)
        .order_by(Order.created_at.desc())
        .all()
    )


@router.post("", response_model=OrderDetail, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Persists an order together with all of its lines in one transaction.
    Either both land or neither does.
    """
    product_ids = {it.product_id for it in payload.items}
    known = {p.id: p for p in db.query(Product).filter(Product.id.in_(product_ids)).all()}
    missing = product_ids - known.keys()
    if missing:
        raise HTTPException(status_code=404, detail=f"Unknown products: {', '.join(sorted(missing))}")

    # Line prices must match the catalog at the moment of purchase
    stale = sorted({it.product_id for it in payload.items if it.price != known[it.product_id].price})
    if stale:
        raise HTTPException(status_code=409, detail=f"Price changed for products: {', '.join(stale)}")

    order = Order(
        user_id=current_user.id,
        total_amount=payload.total_amount,
        status="pending",
        shipping_address=payload.shipping_address.model_dump(),
    )
    db.add(order)
    db.add_all([
        OrderItem(order=order, product_id=it.product_id, quantity=it.quantity, price=it.price)
        for it in payload.items
    ])

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Order insert failed for user {current_user.id}: {e}")
        raise HTTPException(status_code=409, detail="Order could not be stored")

    order = (
        db.query(Order)
        .options(joinedload(Order.items).joinedload(OrderItem.product))
        .filter(Order.id == order.id)
        .first()
    )

    out = OrderDetail.model_validate(order)

    write_log(
        db,
        user_id=current_user.id,
        action="ORDER_CREATE",
        resource="orders",
        ip=client_ip(request),
        meta={"order_id": out.id, "lines": len(out.items), "total": str(out.total_amount)},
    )
    return out


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return _get_own_order(db, current_user, order_id)


# Lines of one of the caller's orders, joined with product
@router.get("/{order_id}/items", response_model=List[OrderItemOut])
def list_order_items(
    order_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    order = _get_own_order(db, current_user, order_id)
    return (
        db.query(OrderItem)
        .options(joinedload(OrderItem.product))
        .filter(OrderItem.order_id == order.id)
        .order_by(OrderItem.created_at.asc())
        .all()
    )
