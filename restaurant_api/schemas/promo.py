"""Promo code schemas"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from restaurant_api.schemas.common import ActionResult


class PromoApplyRequest(BaseModel):
    """Promo code check for a cart total"""
    promo_code: str = Field(min_length=1, max_length=20)
    total_amount: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class PromoResult(ActionResult):
    """Discount outcome; amounts are only set on success"""
    discount_amount: Optional[Decimal] = None
    final_amount: Optional[Decimal] = None
