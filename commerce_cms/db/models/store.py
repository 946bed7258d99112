# models/store.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Store(TimestampMixin, Base):
    __tablename__ = "stores"

    name = Column(String, nullable=False)
    user_id = Column(String, nullable=False, index=True)

    # Everything a store owns goes away with it
    billboards = relationship("Billboard", back_populates="store", cascade="all, delete-orphan")
    categories = relationship("Category", back_populates="store", cascade="all, delete-orphan")
    sizes = relationship("Size", back_populates="store", cascade="all, delete-orphan")
    colors = relationship("Color", back_populates="store", cascade="all, delete-orphan")
    products = relationship("Product", back_populates="store", cascade="all, delete-orphan")
    orders = relationship("Order", back_populates="store", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Store(id={self.id}, name='{self.name}', user_id='{self.user_id}')>"
