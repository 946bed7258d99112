from pydantic import Field
from typing import List, Optional
from .common import CamelModel, RecordRead, ApiResponse
from .store import StoreRead

class ColorBase(CamelModel):
    name: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1, description="Hex color code, e.g. #000000")

class ColorCreate(ColorBase):
    pass

class ColorUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    value: Optional[str] = Field(None, min_length=1)

class ColorRead(ColorBase, RecordRead):
    store_id: str

class ColorResponse(ApiResponse):
    store: StoreRead
    color: ColorRead

class ColorListResponse(ApiResponse):
    store: StoreRead
    colors: List[ColorRead]
