from pydantic import Field
from typing import List, Optional
from .common import CamelModel, RecordRead, ApiResponse
from .store import StoreRead
from .billboard import BillboardRead

class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1)
    billboard_id: str = Field(..., min_length=1)

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    billboard_id: Optional[str] = Field(None, min_length=1)

class CategoryRead(CategoryBase, RecordRead):
    store_id: str
    billboard: Optional[BillboardRead] = None

class CategoryResponse(ApiResponse):
    store: StoreRead
    category: CategoryRead

class CategoryListResponse(ApiResponse):
    store: StoreRead
    categories: List[CategoryRead]
