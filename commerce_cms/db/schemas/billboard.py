from pydantic import Field
from typing import List, Optional
from .common import CamelModel, RecordRead, ApiResponse
from .store import StoreRead

class BillboardBase(CamelModel):
    label: str = Field(..., min_length=1)
    image_public_id: str = Field(..., min_length=1, description="Public id returned by the asset host")

class BillboardCreate(BillboardBase):
    pass

class BillboardUpdate(CamelModel):
    label: Optional[str] = Field(None, min_length=1)
    image_public_id: Optional[str] = Field(None, min_length=1)

class BillboardRead(BillboardBase, RecordRead):
    store_id: str

class BillboardResponse(ApiResponse):
    store: StoreRead
    billboard: BillboardRead

class BillboardListResponse(ApiResponse):
    store: StoreRead
    billboards: List[BillboardRead]
