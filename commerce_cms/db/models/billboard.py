from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Billboard(TimestampMixin, Base):
    __tablename__ = "billboards"

    store_id = Column(String(36), ForeignKey("stores.id"), nullable=False, index=True)
    label = Column(String, nullable=False)
    image_public_id = Column(String, nullable=False)  # asset host identifier

    store = relationship("Store", back_populates="billboards")

    def __repr__(self):
        return f"<Billboard(id={self.id}, label='{self.label}')>"
