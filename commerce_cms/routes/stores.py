# routes/stores.py
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from commerce_cms.database import get_db
from commerce_cms.db.crud import store as store_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.store import StoreCreate, StoreUpdate, StoreResponse, StoreListResponse
from commerce_cms.dependencies import require_user_id, get_owned_store
from commerce_cms.errors import InternalError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/stores",
    tags=["stores"]
)

@router.get("", response_model=StoreListResponse, status_code=status.HTTP_201_CREATED)
def get_stores(
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db)
):
    """Get every store owned by the caller"""
    stores = store_crud.get_user_stores(db, user_id)
    return {"message": "Stores retrieved successfully.", "stores": stores}

@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    store: StoreCreate,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db)
):
    """Create a new store owned by the caller"""
    try:
        db_store = store_crud.create_store(db, user_id, store)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Store {db_store.id} created by {user_id}")
    return {"message": "New store created successfully.", "store": db_store}

@router.get("/{store_id}", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def get_store(store: Store = Depends(get_owned_store)):
    """Get one of the caller's stores"""
    return {"message": f"{store.name} store retrieved successfully.", "store": store}

@router.patch("/{store_id}", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def update_store(
    store_update: StoreUpdate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Rename a store"""
    try:
        db_store = store_crud.update_store(db, store, store_update)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    return {"message": f"{db_store.name} store updated successfully.", "store": db_store}

@router.delete("/{store_id}", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def delete_store(
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Delete a store together with everything it owns"""
    deleted = StoreResponse.model_validate(
        {"message": f"{store.name} store deleted successfully.", "store": store}
    )
    try:
        store_crud.delete_store(db, store)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Store {deleted.store.id} deleted")
    return deleted
