from pydantic import Field
from typing import List, Optional
from .common import CamelModel, RecordRead, ApiResponse
from .store import StoreRead

class SizeBase(CamelModel):
    name: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)

class SizeCreate(SizeBase):
    pass

class SizeUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    value: Optional[str] = Field(None, min_length=1)

class SizeRead(SizeBase, RecordRead):
    store_id: str

class SizeResponse(ApiResponse):
    store: StoreRead
    size: SizeRead

class SizeListResponse(ApiResponse):
    store: StoreRead
    sizes: List[SizeRead]
