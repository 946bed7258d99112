from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import order as order_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.order import OrderListResponse
from commerce_cms.dependencies import get_owned_store
from commerce_cms.formatting import format_currency, format_date

router = APIRouter(
    prefix="/api/{store_id}/orders",
    tags=["orders"]
)

@router.get("", response_model=OrderListResponse, status_code=status.HTTP_201_CREATED)
def get_orders(
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Orders of the caller's store, newest first, shaped for the admin table"""
    orders = order_crud.get_orders(db, store.id)
    rows = [
        {
            "id": order.id,
            "is_paid": order.is_paid,
            "phone": order.phone,
            "address": order.address,
            "products": ", ".join(item.product.name for item in order.order_items if item.product),
            "total_price": format_currency(order_crud.order_total(order)),
            "created_at": format_date(order.created_at),
        }
        for order in orders
    ]
    return {
        "message": f"Orders for the {store.name} store retrieved successfully.",
        "store": store,
        "orders": rows,
    }
