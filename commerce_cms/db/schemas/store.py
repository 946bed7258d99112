from pydantic import Field
from typing import List, Optional
from .common import CamelModel, RecordRead, ApiResponse

class StoreCreate(CamelModel):
    name: str = Field(..., min_length=1)

class StoreUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)

class StoreRead(RecordRead):
    name: str
    user_id: str

class StoreResponse(ApiResponse):
    store: StoreRead

class StoreListResponse(ApiResponse):
    stores: List[StoreRead]
