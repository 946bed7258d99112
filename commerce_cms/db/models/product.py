from sqlalchemy import Column, String, Boolean, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Product(TimestampMixin, Base):
    __tablename__ = "products"

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    size_id = Column(String(36), ForeignKey("sizes.id"), nullable=False, index=True)
    color_id = Column(String(36), ForeignKey("colors.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_archived = Column(Boolean, default=False, nullable=False)

    store = relationship("Store", back_populates="products")
    category = relationship("Category")
    size = relationship("Size")
    color = relationship("Color")
    images = relationship("Image", back_populates="product", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
