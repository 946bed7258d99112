import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import size as size_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.size import (
    SizeCreate, SizeUpdate, SizeResponse, SizeListResponse
)
from commerce_cms.dependencies import get_public_store, get_owned_store
from commerce_cms.errors import InternalError, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/{store_id}/sizes",
    tags=["sizes"]
)

def _get_size_or_404(db: Session, store: Store, size_id: str):
    db_size = size_crud.get_size(db, store.id, size_id)
    if not db_size:
        raise NotFound("Size not found")
    return db_size

@router.get("", response_model=SizeListResponse, status_code=status.HTTP_201_CREATED)
def get_sizes(
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get all sizes of a store (public)"""
    return {
        "message": f"Sizes for {store.name} store retrieved successfully.",
        "store": store,
        "sizes": size_crud.get_sizes(db, store.id),
    }

@router.post("", response_model=SizeResponse, status_code=status.HTTP_201_CREATED)
def create_size(
    size: SizeCreate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Create a new size"""
    try:
        db_size = size_crud.create_size(db, store.id, size)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Size {db_size.id} created in store {store.id}")
    return {"message": "New size created successfully.", "store": store, "size": db_size}

@router.get("/{size_id}", response_model=SizeResponse, status_code=status.HTTP_201_CREATED)
def get_size(
    size_id: str,
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get a specific size (public)"""
    db_size = _get_size_or_404(db, store, size_id)
    return {
        "message": f"Size for {store.name} store retrieved successfully.",
        "store": store,
        "size": db_size,
    }

@router.patch("/{size_id}", response_model=SizeResponse, status_code=status.HTTP_201_CREATED)
def update_size(
    size_id: str,
    size: SizeUpdate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Update a size"""
    db_size = _get_size_or_404(db, store, size_id)
    try:
        db_size = size_crud.update_size(db, db_size, size)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    return {
        "message": f"Size for {store.name} store updated successfully.",
        "store": store,
        "size": db_size,
    }

@router.delete("/{size_id}", response_model=SizeResponse, status_code=status.HTTP_201_CREATED)
def delete_size(
    size_id: str,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Delete a size. Products still using it are left to the database's foreign keys."""
    db_size = _get_size_or_404(db, store, size_id)
    deleted = SizeResponse.model_validate({
        "message": f"Size for {store.name} store deleted successfully.",
        "store": store,
        "size": db_size,
    })
    try:
        size_crud.delete_size(db, db_size)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Size {size_id} deleted from store {deleted.store.id}")
    return deleted
