from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import Optional
from commerce_cms.config import AUTH_USER_HEADER
from commerce_cms.database import get_db
from commerce_cms.db.crud import store as store_crud
from commerce_cms.db.models.store import Store
from commerce_cms.errors import BadRequest, Unauthorized

def get_current_user_id(request: Request) -> Optional[str]:
    """User id forwarded by the identity provider, or None for anonymous callers"""
    user_id = request.headers.get(AUTH_USER_HEADER, "").strip()
    return user_id or None

def require_user_id(user_id: Optional[str] = Depends(get_current_user_id)) -> str:
    if not user_id:
        raise Unauthorized()
    return user_id

def get_public_store(store_id: str, db: Session = Depends(get_db)) -> Store:
    """Store by id, no ownership check. Used by the storefront-facing reads."""
    store = store_crud.get_store(db, store_id)
    if not store:
        raise BadRequest()
    return store

def get_owned_store(
    store_id: str,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
) -> Store:
    """Store by id AND owner. Someone else's store looks the same as a missing one."""
    store = store_crud.get_user_store(db, store_id, user_id)
    if not store:
        raise BadRequest()
    return store
