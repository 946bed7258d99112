import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import color as color_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.color import (
    ColorCreate, ColorUpdate, ColorResponse, ColorListResponse
)
from commerce_cms.dependencies import get_public_store, get_owned_store
from commerce_cms.errors import InternalError, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/{store_id}/colors",
    tags=["colors"]
)

def _get_color_or_404(db: Session, store: Store, color_id: str):
    db_color = color_crud.get_color(db, store.id, color_id)
    if not db_color:
        raise NotFound("Color not found")
    return db_color

@router.get("", response_model=ColorListResponse, status_code=status.HTTP_201_CREATED)
def get_colors(
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get all colors of a store (public)"""
    return {
        "message": f"Colors for {store.name} store retrieved successfully.",
        "store": store,
        "colors": color_crud.get_colors(db, store.id),
    }

@router.post("", response_model=ColorResponse, status_code=status.HTTP_201_CREATED)
def create_color(
    color: ColorCreate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Create a new color"""
    try:
        db_color = color_crud.create_color(db, store.id, color)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Color {db_color.id} created in store {store.id}")
    return {"message": "New color created successfully.", "store": store, "color": db_color}

@router.get("/{color_id}", response_model=ColorResponse, status_code=status.HTTP_201_CREATED)
def get_color(
    color_id: str,
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get a specific color (public)"""
    db_color = _get_color_or_404(db, store, color_id)
    return {
        "message": f"Color for {store.name} store retrieved successfully.",
        "store": store,
        "color": db_color,
    }

@router.patch("/{color_id}", response_model=ColorResponse, status_code=status.HTTP_201_CREATED)
def update_color(
    color_id: str,
    color: ColorUpdate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Update a color"""
    db_color = _get_color_or_404(db, store, color_id)
    try:
        db_color = color_crud.update_color(db, db_color, color)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    return {
        "message": f"Color for {store.name} store updated successfully.",
        "store": store,
        "color": db_color,
    }

@router.delete("/{color_id}", response_model=ColorResponse, status_code=status.HTTP_201_CREATED)
def delete_color(
    color_id: str,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Delete a color"""
    db_color = _get_color_or_404(db, store, color_id)
    deleted = ColorResponse.model_validate({
        "message": f"Color for {store.name} store deleted successfully.",
        "store": store,
        "color": db_color,
    })
    try:
        color_crud.delete_color(db, db_color)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Color {color_id} deleted from store {deleted.store.id}")
    return deleted
