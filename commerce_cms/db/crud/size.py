from sqlalchemy.orm import Session
from typing import List, Optional
from commerce_cms.db.models.size import Size
from commerce_cms.db.schemas.size import SizeCreate, SizeUpdate

def get_size(db: Session, store_id: str, size_id: str) -> Optional[Size]:
    return db.query(Size).filter(Size.id == size_id, Size.store_id == store_id).first()

def get_sizes(db: Session, store_id: str) -> List[Size]:
    return db.query(Size).filter(Size.store_id == store_id).order_by(Size.created_at.desc()).all()

def create_size(db: Session, store_id: str, size: SizeCreate) -> Size:
    db_size = Size(**size.model_dump(), store_id=store_id)
    db.add(db_size)
    db.commit()
    db.refresh(db_size)
    return db_size

def update_size(db: Session, db_size: Size, size_update: SizeUpdate) -> Size:
    update_data = size_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_size, field, value)
    db.commit()
    db.refresh(db_size)
    return db_size

def delete_size(db: Session, db_size: Size) -> None:
    db.delete(db_size)
    db.commit()
