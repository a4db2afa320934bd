from datetime import datetime
from pydantic import BaseModel


class ChirpCreate(BaseModel):
    body: str


class ChirpOut(BaseModel):
    id: str
    body: str
    user_id: str
    created_at: datetime
    updated_at: datetime
