from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from commerce_cms.database import Base
from .mixins import TimestampMixin

class Image(TimestampMixin, Base):
    __tablename__ = "images"

    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    image_public_id = Column(String, nullable=False)

    product = relationship("Product", back_populates="images")
