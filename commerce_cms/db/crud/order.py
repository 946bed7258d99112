from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from commerce_cms.db.models.order import Order, OrderItem
from commerce_cms.db.models.product import Product

def get_order(db: Session, order_id: str) -> Optional[Order]:
    return db.query(Order).filter(Order.id == order_id).first()

def get_orders(
    db: Session,
    store_id: str,
    is_paid: Optional[bool] = None,
    limit: Optional[int] = None,
) -> List[Order]:
    query = (
        db.query(Order)
        .options(selectinload(Order.order_items).selectinload(OrderItem.product))
        .filter(Order.store_id == store_id)
    )
    if is_paid is not None:
        query = query.filter(Order.is_paid == is_paid)
    query = query.order_by(Order.created_at.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()

def get_orders_count(db: Session, store_id: str, is_paid: Optional[bool] = None) -> int:
    query = db.query(Order).filter(Order.store_id == store_id)
    if is_paid is not None:
        query = query.filter(Order.is_paid == is_paid)
    return query.count()

def lookup_products(db: Session, store_id: str, product_ids: List[str]) -> List[Product]:
    """One lookup per requested id. Unknown ids are dropped, repeated ids repeat the product."""
    products = []
    for product_id in product_ids:
        product = db.query(Product).filter(Product.id == product_id, Product.store_id == store_id).first()
        if product:
            products.append(product)
    return products

def create_order(db: Session, store_id: str, products: List[Product]) -> Order:
    db_order = Order(store_id=store_id, is_paid=False)
    db_order.order_items = [OrderItem(product_id=product.id) for product in products]
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order

def mark_order_paid(
    db: Session,
    db_order: Order,
    name: str = "",
    email: str = "",
    phone: str = "",
    address: str = "",
) -> Order:
    db_order.is_paid = True
    db_order.name = name
    db_order.email = email
    db_order.phone = phone
    db_order.address = address
    db.commit()
    db.refresh(db_order)
    return db_order

def order_total(db_order: Order) -> float:
    return sum(float(item.product.price) for item in db_order.order_items if item.product)
