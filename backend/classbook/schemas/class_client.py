from pydantic import BaseModel, Field
from datetime import datetime

class ClassClientOut(BaseModel):
    class_id: int = Field(alias="classId")
    client_id: int = Field(alias="clientId")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
        populate_by_name = True
