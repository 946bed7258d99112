from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List, Optional
from commerce_cms.db.models.product import Product
from commerce_cms.db.models.image import Image
from commerce_cms.db.models.category import Category
from commerce_cms.db.schemas.product import ProductCreate, ProductUpdate

def _with_relations(query):
    return query.options(
        joinedload(Product.category).joinedload(Category.billboard),
        joinedload(Product.size),
        joinedload(Product.color),
        selectinload(Product.images),
    )

def get_product(db: Session, store_id: str, product_id: str) -> Optional[Product]:
    return (
        _with_relations(db.query(Product))
        .filter(Product.id == product_id, Product.store_id == store_id)
        .first()
    )

def get_products(
    db: Session,
    store_id: str,
    category_id: Optional[str] = None,
    color_id: Optional[str] = None,
    size_id: Optional[str] = None,
    is_featured: Optional[bool] = None,
) -> List[Product]:
    query = _with_relations(db.query(Product)).filter(Product.store_id == store_id)
    if category_id:
        query = query.filter(Product.category_id == category_id)
    if color_id:
        query = query.filter(Product.color_id == color_id)
    if size_id:
        query = query.filter(Product.size_id == size_id)
    # isFeatured=false means "don't filter", not "only non-featured"
    if is_featured:
        query = query.filter(Product.is_featured.is_(True))
    query = query.filter(Product.is_archived.is_(False))
    return query.order_by(Product.created_at.desc()).all()

def get_products_count(db: Session, store_id: str, is_archived: bool = False) -> int:
    return db.query(Product).filter(Product.store_id == store_id, Product.is_archived == is_archived).count()

def create_product(db: Session, store_id: str, product: ProductCreate) -> Product:
    # category/size/color ids are not checked against the store
    product_data = product.model_dump(exclude={'images'})
    db_product = Product(**product_data, store_id=store_id)
    db_product.images = [Image(image_public_id=public_id) for public_id in product.images]
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    return db_product

def update_product(db: Session, db_product: Product, product_update: ProductUpdate) -> Product:
    """Apply a partial update. A new image list replaces the old one in the same commit."""
    update_data = product_update.model_dump(exclude_unset=True, exclude_none=True, exclude={'images'})
    for field, value in update_data.items():
        setattr(db_product, field, value)
    if product_update.images is not None:
        replace_product_images(db_product, product_update.images)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_product)
    return db_product

def replace_product_images(db_product: Product, image_public_ids: List[str]) -> None:
    # delete-orphan cascade removes the old rows on flush
    db_product.images = [Image(image_public_id=public_id) for public_id in image_public_ids]

def delete_product(db: Session, db_product: Product) -> None:
    db.delete(db_product)
    db.commit()
