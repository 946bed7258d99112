from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Order(TimestampMixin, Base):
    __tablename__ = "orders"

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    is_paid = Column(Boolean, default=False, nullable=False)
    # Customer contact, filled in from the payment processor once paid
    name = Column(String, default="", nullable=False)
    email = Column(String, default="", nullable=False)
    phone = Column(String, default="", nullable=False)
    address = Column(String, default="", nullable=False)

    store = relationship("Store", back_populates="orders")
    order_items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Order(id={self.id}, store_id='{self.store_id}', is_paid={self.is_paid})>"

class OrderItem(TimestampMixin, Base):
    __tablename__ = "order_items"

    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)

    order = relationship("Order", back_populates="order_items")
    product = relationship("Product")
