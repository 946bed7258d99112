from sqlalchemy.orm import Session
from typing import List, Optional
from commerce_cms.db.models.color import Color
from commerce_cms.db.schemas.color import ColorCreate, ColorUpdate

def get_color(db: Session, store_id: str, color_id: str) -> Optional[Color]:
    return db.query(Color).filter(Color.id == color_id, Color.store_id == store_id).first()

def get_colors(db: Session, store_id: str) -> List[Color]:
    return db.query(Color).filter(Color.store_id == store_id).order_by(Color.created_at.desc()).all()

def create_color(db: Session, store_id: str, color: ColorCreate) -> Color:
    db_color = Color(**color.model_dump(), store_id=store_id)
    db.add(db_color)
    db.commit()
    db.refresh(db_color)
    return db_color

def update_color(db: Session, db_color: Color, color_update: ColorUpdate) -> Color:
    update_data = color_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_color, field, value)
    db.commit()
    db.refresh(db_color)
    return db_color

def delete_color(db: Session, db_color: Color) -> None:
    db.delete(db_color)
    db.commit()
