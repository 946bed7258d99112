from pydantic import Field
from typing import List
from .common import CamelModel, ApiResponse
from .store import StoreRead

class CheckoutRequest(CamelModel):
    product_ids: List[str] = Field(..., min_length=1)

class CheckoutResponse(CamelModel):
    url: str

class OrderRow(CamelModel):
    """One line of the admin orders table"""
    id: str
    is_paid: bool
    phone: str
    address: str
    products: str
    total_price: str
    created_at: str

class OrderListResponse(ApiResponse):
    store: StoreRead
    orders: List[OrderRow]

class RevenuePoint(CamelModel):
    name: str
    total: float

class Transaction(CamelModel):
    name: str
    email: str
    price: str
    created_at: str

class DashboardRead(CamelModel):
    total_revenue: float
    sales_count: int
    stock_count: int
    graph_revenue: List[RevenuePoint]
    recent_transactions: List[Transaction]

class DashboardResponse(ApiResponse):
    store: StoreRead
    dashboard: DashboardRead
