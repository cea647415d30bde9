"""Location schemas"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel


class LocationResponse(BaseModel):
    """Branch shown in the store locator"""
    id: int
    name: str
    address: str
    city: str
    phone: Optional[str]
    opening_hours: Optional[str]
    latitude: Optional[Decimal]
    longitude: Optional[Decimal]
    image_url: Optional[str]

    class Config:
        from_attributes = True
