from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Size(TimestampMixin, Base):
    __tablename__ = "sizes"

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    value = Column(String, nullable=False)  # free text, e.g. "XL" or "42"

    store = relationship("Store", back_populates="sizes")
