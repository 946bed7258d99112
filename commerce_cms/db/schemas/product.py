from pydantic import Field
from decimal import Decimal
from typing import List, Optional
from .common import CamelModel, RecordRead, ApiResponse
from .store import StoreRead
from .category import CategoryRead
from .size import SizeRead
from .color import ColorRead

class ProductBase(CamelModel):
    name: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    size_id: str = Field(..., min_length=1)
    color_id: str = Field(..., min_length=1)
    is_featured: bool = False
    is_archived: bool = False

class ProductCreate(ProductBase):
    price: Decimal = Field(..., gt=0)
    images: List[str] = Field(..., min_length=1, description="Public ids returned by the asset host")

class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, gt=0)
    category_id: Optional[str] = Field(None, min_length=1)
    size_id: Optional[str] = Field(None, min_length=1)
    color_id: Optional[str] = Field(None, min_length=1)
    is_featured: Optional[bool] = None
    is_archived: Optional[bool] = None
    # When present the whole image set is replaced
    images: Optional[List[str]] = Field(None, min_length=1)

class ImageRead(RecordRead):
    product_id: str
    image_public_id: str

class ProductRead(ProductBase, RecordRead):
    store_id: str
    price: float
    category: Optional[CategoryRead] = None
    size: Optional[SizeRead] = None
    color: Optional[ColorRead] = None
    images: List[ImageRead] = []

class ProductResponse(ApiResponse):
    store: StoreRead
    product: ProductRead

class ProductListResponse(ApiResponse):
    store: StoreRead
    products: List[ProductRead]
