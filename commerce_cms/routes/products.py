import logging
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from commerce_cms.database import get_db
from commerce_cms.db.crud import product as product_crud
from commerce_cms.db.models.store import Store
from commerce_cms.db.schemas.product import (
    ProductCreate, ProductUpdate, ProductResponse, ProductListResponse
)
from commerce_cms.dependencies import get_public_store, get_owned_store
from commerce_cms.errors import InternalError, NotFound

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/{store_id}/products",
    tags=["products"]
)

def _get_product_or_404(db: Session, store: Store, product_id: str):
    db_product = product_crud.get_product(db, store.id, product_id)
    if not db_product:
        raise NotFound("Product not found")
    return db_product

@router.get("", response_model=ProductListResponse, status_code=status.HTTP_201_CREATED)
def get_products(
    category_id: Optional[str] = Query(None, alias="categoryId"),
    color_id: Optional[str] = Query(None, alias="colorId"),
    size_id: Optional[str] = Query(None, alias="sizeId"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured"),
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """
    Get the non-archived products of a store, newest first (public).

    The storefront narrows the list with categoryId / colorId / sizeId and
    asks for featured products only with isFeatured=true.
    """
    products = product_crud.get_products(
        db,
        store.id,
        category_id=category_id,
        color_id=color_id,
        size_id=size_id,
        is_featured=is_featured,
    )
    return {
        "message": f"Products for the {store.name} store retrieved successfully.",
        "store": store,
        "products": products,
    }

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Create a new product with its images"""
    try:
        db_product = product_crud.create_product(db, store.id, product)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Product {db_product.id} created in store {store.id}")
    return {
        "message": "New product created successfully.",
        "store": store,
        "product": product_crud.get_product(db, store.id, db_product.id),
    }

@router.get("/{product_id}", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def get_product(
    product_id: str,
    store: Store = Depends(get_public_store),
    db: Session = Depends(get_db)
):
    """Get a specific product with category, size, color and images (public)"""
    return {
        "message": f"Product for the {store.name} store retrieved successfully.",
        "store": store,
        "product": _get_product_or_404(db, store, product_id),
    }

@router.patch("/{product_id}", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def update_product(
    product_id: str,
    product: ProductUpdate,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Update a product. Sending `images` swaps the whole image set in one commit."""
    db_product = _get_product_or_404(db, store, product_id)
    try:
        db_product = product_crud.update_product(db, db_product, product)
    except SQLAlchemyError as e:
        raise InternalError(f"Database error: {str(e)}")
    return {
        "message": f"Product for the {store.name} store updated successfully.",
        "store": store,
        "product": db_product,
    }

@router.delete("/{product_id}", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def delete_product(
    product_id: str,
    store: Store = Depends(get_owned_store),
    db: Session = Depends(get_db)
):
    """Delete a product together with its images"""
    db_product = _get_product_or_404(db, store, product_id)
    deleted = ProductResponse.model_validate({
        "message": f"Product for the {store.name} store deleted successfully.",
        "store": store,
        "product": db_product,
    })
    try:
        product_crud.delete_product(db, db_product)
    except SQLAlchemyError as e:
        db.rollback()
        raise InternalError(f"Database error: {str(e)}")
    logger.info(f"Product {product_id} deleted from store {deleted.store.id}")
    return deleted
