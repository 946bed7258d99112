from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime

class CamelModel(BaseModel):
    """JSON uses camelCase keys; python code uses snake_case"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )

class RecordRead(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime

class ApiResponse(CamelModel):
    success: bool = True
    message: str
