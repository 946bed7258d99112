from sqlalchemy.orm import Session
from typing import List, Optional
from commerce_cms.db.models.billboard import Billboard
from commerce_cms.db.schemas.billboard import BillboardCreate, BillboardUpdate

def get_billboard(db: Session, store_id: str, billboard_id: str) -> Optional[Billboard]:
    return db.query(Billboard).filter(Billboard.id == billboard_id, Billboard.store_id == store_id).first()

def get_billboards(db: Session, store_id: str) -> List[Billboard]:
    return db.query(Billboard).filter(Billboard.store_id == store_id).order_by(Billboard.created_at.desc()).all()

def create_billboard(db: Session, store_id: str, billboard: BillboardCreate) -> Billboard:
    db_billboard = Billboard(**billboard.model_dump(), store_id=store_id)
    db.add(db_billboard)
    db.commit()
    db.refresh(db_billboard)
    return db_billboard

def update_billboard(db: Session, db_billboard: Billboard, billboard_update: BillboardUpdate) -> Billboard:
    update_data = billboard_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_billboard, field, value)
    db.commit()
    db.refresh(db_billboard)
    return db_billboard

def delete_billboard(db: Session, db_billboard: Billboard) -> None:
    db.delete(db_billboard)
    db.commit()
