import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import category as category_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.category import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryListResponse
)
from commerce_cms.dependencies import get_public_store, get_owned_store
from commerce_cms.errors import InternalError, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/{store_id}/categories",
    tags=["categories"]
)

def _get_category_or_404(db: Session, store: Store, category_id: str):
    db_category = category_crud.get_category(db, store.id, category_id)
    if not db_category:
        raise NotFound("Category not found")
    return db_category

@router.get("", response_model=CategoryListResponse, status_code=status.HTTP_201_CREATED)
def get_categories(
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get all categories of a store (public)"""
    return {
        "message": f"Categories for {store.name} store retrieved successfully.",
        "store": store,
        "categories": category_crud.get_categories(db, store.id),
    }

@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category: CategoryCreate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Create a new category"""
    try:
        db_category = category_crud.create_category(db, store.id, category)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Category {db_category.id} created in store {store.id}")
    return {"message": "New category created successfully.", "store": store, "category": db_category}

@router.get("/{category_id}", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def get_category(
    category_id: str,
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get a specific category (public)"""
    db_category = _get_category_or_404(db, store, category_id)
    return {
        "message": f"Category for {store.name} store retrieved successfully.",
        "store": store,
        "category": db_category,
    }

@router.patch("/{category_id}", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def update_category(
    category_id: str,
    category: CategoryUpdate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Update a category"""
    db_category = _get_category_or_404(db, store, category_id)
    try:
        db_category = category_crud.update_category(db, db_category, category)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    return {
        "message": f"Category for {store.name} store updated successfully.",
        "store": store,
        "category": db_category,
    }

@router.delete("/{category_id}", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def delete_category(
    category_id: str,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Delete a category"""
    db_category = _get_category_or_404(db, store, category_id)
    deleted = CategoryResponse.model_validate({
        "message": f"Category for {store.name} store deleted successfully.",
        "store": store,
        "category": db_category,
    })
    try:
        category_crud.delete_category(db, db_category)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Category {category_id} deleted from store {deleted.store.id}")
    return deleted
