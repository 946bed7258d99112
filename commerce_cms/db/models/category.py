from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Category(TimestampMixin, Base):
    __tablename__ = "categories"

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    billboard_id = Column(String(36), ForeignKey("billboards.id"), nullable=False, index=True)
    name = Column(String, nullable=False)

    store = relationship("Store", back_populates="categories")
    billboard = relationship("Billboard")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
