from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from commerce_cms.db.models.category import Category
from commerce_cms.db.schemas.category import CategoryCreate, CategoryUpdate

def get_category(db: Session, store_id: str, category_id: str) -> Optional[Category]:
    return (
        db.query(Category)
        .options(joinedload(Category.billboard))
        .filter(Category.id == category_id, Category.store_id == store_id)
        .first()
    )

def get_categories(db: Session, store_id: str) -> List[Category]:
    return (
        db.query(Category)
        .options(joinedload(Category.billboard))
        .filter(Category.store_id == store_id)
        .order_by(Category.created_at.desc())
        .all()
    )

def create_category(db: Session, store_id: str, category: CategoryCreate) -> Category:
    # billboard_id is not checked against the store
    db_category = Category(**category.model_dump(), store_id=store_id)
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category

def update_category(db: Session, db_category: Category, category_update: CategoryUpdate) -> Category:
    update_data = category_update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(db_category, field, value)
    db.commit()
    db.refresh(db_category)
    return db_category

def delete_category(db: Session, db_category: Category) -> None:
    db.delete(db_category)
    db.commit()
