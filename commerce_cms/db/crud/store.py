from sqlalchemy.orm import Session
from typing import List, Optional
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.store import StoreCreate, StoreUpdate

def get_store(db: Session, store_id: str) -> Optional[Store]:
    return db.query(Store).filter(Store.id == store_id).first()

def get_user_store(db: Session, store_id: str, user_id: str) -> Optional[Store]:
    return db.query(Store).filter(Store.id == store_id, Store.user_id == user_id).first()

def get_user_stores(db: Session, user_id: str) -> List[Store]:
    return db.query(Store).filter(Store.user_id == user_id).order_by(Store.created_at).all()

def create_store(db: Session, user_id: str, store: StoreCreate) -> Store:
    db_store = Store(**store.model_dump(), user_id=user_id)
    db.add(db_store)
    db.commit()
    db.refresh(db_store)
    return db_store

def update_store(db: Session, db_store: Store, store_update: StoreUpdate) -> Store:
    update_data = store_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_store, field, value)
    db.commit()
    db.refresh(db_store)
    return db_store

def delete_store(db: Session, db_store: Store) -> None:
    db.delete(db_store)
    db.commit()
