from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Color(TimestampMixin, Base):
    __tablename__ = "colors"

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    value = Column(String, nullable=False)  # hex code, e.g. "#ff0000"

    store = relationship("Store", back_populates="colors")
