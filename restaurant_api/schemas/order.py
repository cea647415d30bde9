"""Order schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, EmailStr, Field

from restaurant_api.models.order import OrderStatus
from restaurant_api.schemas.common import ActionResult


class OrderItemCreate(BaseModel):
    """Cart entry submitted at checkout"""
    item_id: int
    quantity: int = Field(gt=0)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    name: Optional[str] = None  # Display name for the confirmation email


class OrderCreate(BaseModel):
    """Create order request"""
    delivery_address: str = Field(min_length=1)
    phone: str = Field(min_length=1, max_length=20)
    email: EmailStr
    total_amount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    payment_method: str = Field(min_length=1, max_length=50)
    items: List[OrderItemCreate] = Field(min_length=1)


class OrderResult(ActionResult):
    """Outcome of placing an order"""
    order_id: Optional[int] = None


class OrderStatusUpdate(BaseModel):
    """Admin status overwrite"""
    status: OrderStatus


class OrderHeader(BaseModel):
    """Order fields shown on the tracking page"""
    id: int
    status: str
    order_date: datetime
    total_amount: Decimal
    payment_method: str

    class Config:
        from_attributes = True


class OrderLine(BaseModel):
    """Line item joined with the current menu entry"""
    item_name: str
    description: Optional[str]
    quantity: int
    price: Decimal


class OrderStatusResult(ActionResult):
    """Tracking lookup result; order and items are empty on failure"""
    order: Optional[OrderHeader] = None
    items: List[OrderLine] = []


class OrderHistoryEntry(BaseModel):
    """Row in a customer's order history"""
    id: int
    order_date: datetime
    total_amount: Decimal
    status: str

    class Config:
        from_attributes = True


class OrderHistoryResult(ActionResult):
    """Order history lookup; orders is empty on failure"""
    orders: List[OrderHistoryEntry] = []


class OrderSummaryLine(BaseModel):
    name: str
    quantity: int
    price: Decimal


class OrderSummary(BaseModel):
    """Everything the confirmation email needs, captured after commit"""
    order_id: int
    email: str
    delivery_address: str
    phone: str
    payment_method: str
    total_amount: Decimal
    lines: List[OrderSummaryLine]
