"""Menu, deal and offer schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel


class MenuItemResponse(BaseModel):
    """Menu item response"""
    id: int
    item_name: str
    description: Optional[str]
    price: Decimal
    category: Optional[str]
    image_url: Optional[str]
    calories: Optional[int]
    available: bool

    class Config:
        from_attributes = True


class MenuSearchResult(BaseModel):
    """Menu search result"""
    items: List[MenuItemResponse]
    total: int


class DealResponse(BaseModel):
    """Deal response"""
    id: int
    deal_name: str
    description: Optional[str]
    price: Decimal
    image_url: Optional[str]
    priority: int

    class Config:
        from_attributes = True


class SpecialOfferResponse(BaseModel):
    """Special offer response"""
    id: int
    offer_name: str
    description: Optional[str]
    discount_type: Optional[str]
    discount_value: Optional[Decimal]
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    priority: int

    class Config:
        from_attributes = True
