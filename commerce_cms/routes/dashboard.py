from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, List
from commerce_cms.database import get_db
from commerce_cms.db.crud import order as order_crud
from commerce_cms.db.crud import product as product_crud
from commerce_cms.db.models.order import Order
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.order import DashboardResponse
from commerce_cms.dependencies import get_owned_store
from commerce_cms.formatting import MONTHS, format_currency, format_date

router = APIRouter(
    prefix="/api/{store_id}/dashboard",
    tags=["dashboard"]
)

RECENT_TRANSACTIONS = 10

def monthly_revenue(paid_orders: List[Order]) -> List[Dict]:
    """Revenue per calendar month of order creation, all years folded together"""
    totals = [0.0] * 12
    for order in paid_orders:
        totals[order.created_at.month - 1] += order_crud.order_total(order)
    return [{"name": name, "total": round(total, 2)} for name, total in zip(MONTHS, totals)]

@router.get("", response_model=DashboardResponse, status_code=status.HTTP_201_CREATED)
def get_dashboard(
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Revenue, sales and stock figures for the store overview page"""
    paid_orders = order_crud.get_orders(db, store.id, is_paid=True)
    total_revenue = sum(order_crud.order_total(order) for order in paid_orders)
    recent = [
        {
            "name": order.name,
            "email": order.email,
            "price": format_currency(order_crud.order_total(order)),
            "created_at": format_date(order.created_at),
        }
        for order in order_crud.get_orders(db, store.id, is_paid=True, limit=RECENT_TRANSACTIONS)
    ]
    return {
        "message": f"Overview of the {store.name} store retrieved successfully.",
        "store": store,
        "dashboard": {
            "total_revenue": round(total_revenue, 2),
            "sales_count": order_crud.get_orders_count(db, store.id, is_paid=True),
            "stock_count": product_crud.get_products_count(db, store.id),
            "graph_revenue": monthly_revenue(paid_orders),
            "recent_transactions": recent,
        },
    }
