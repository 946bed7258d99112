import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime

def generate_id() -> str:
    return str(uuid.uuid4())

class TimestampMixin:
    """Primary key and audit columns shared by every table"""
    id = Column(String(36), primary_key=True, index=True, default=generate_id)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
