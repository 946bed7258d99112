import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import billboard as billboard_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.billboard import (
    BillboardCreate, BillboardUpdate, BillboardResponse, BillboardListResponse
)
from commerce_cms.dependencies import get_public_store, get_owned_store
from commerce_cms.errors import InternalError, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/{store_id}/billboards",
    tags=["billboards"]
)

def _get_billboard_or_404(db: Session, store: Store, billboard_id: str):
    db_billboard = billboard_crud.get_billboard(db, store.id, billboard_id)
    if not db_billboard:
        raise NotFound("Billboard not found")
    return db_billboard

@router.get("", response_model=BillboardListResponse, status_code=status.HTTP_201_CREATED)
def get_billboards(
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get all billboards of a store (public)"""
    return {
        "message": f"Billboards for {store.name} store retrieved successfully.",
        "store": store,
        "billboards": billboard_crud.get_billboards(db, store.id),
    }

@router.post("", response_model=BillboardResponse, status_code=status.HTTP_201_CREATED)
def create_billboard(
    billboard: BillboardCreate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Create a new billboard"""
    try:
        db_billboard = billboard_crud.create_billboard(db, store.id, billboard)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Billboard {db_billboard.id} created in store {store.id}")
    return {"message": "New billboard created successfully.", "store": store, "billboard": db_billboard}

@router.get("/{billboard_id}", response_model=BillboardResponse, status_code=status.HTTP_201_CREATED)
def get_billboard(
    billboard_id: str,
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get a specific billboard (public)"""
    db_billboard = _get_billboard_or_404(db, store, billboard_id)
    return {
        "message": f"Billboard for {store.name} store retrieved successfully.",
        "store": store,
        "billboard": db_billboard,
    }

@router.patch("/{billboard_id}", response_model=BillboardResponse, status_code=status.HTTP_201_CREATED)
def update_billboard(
    billboard_id: str,
    billboard: BillboardUpdate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Update a billboard"""
    db_billboard = _get_billboard_or_404(db, store, billboard_id)
    try:
        db_billboard = billboard_crud.update_billboard(db, db_billboard, billboard)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    return {
        "message": f"Billboard for {store.name} store updated successfully.",
        "store": store,
        "billboard": db_billboard,
    }

@router.delete("/{billboard_id}", response_model=BillboardResponse, status_code=status.HTTP_201_CREATED)
def delete_billboard(
    billboard_id: str,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Delete a billboard. Categories still pointing at it are left to the database's foreign keys."""
    db_billboard = _get_billboard_or_404(db, store, billboard_id)
    deleted = BillboardResponse.model_validate({
        "message": f"Billboard for {store.name} store deleted successfully.",
        "store": store,
        "billboard": db_billboard,
    })
    try:
        billboard_crud.delete_billboard(db, db_billboard)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Billboard {billboard_id} deleted from store {deleted.store.id}")
    return deleted
