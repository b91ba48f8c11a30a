# shopdb/schemas.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


# 📝 Order info
class OrderInfoCreate(BaseModel):
    info: Optional[str] = None


class OrderInfoOut(BaseModel):
    id: int
    order_id: int
    info: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
