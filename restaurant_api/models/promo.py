"""Promo code model"""

import enum
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Numeric

from restaurant_api.database import Base


class DiscountType(str, enum.Enum):
    """How a discount value is interpreted"""
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class PromoCode(Base):
    """Promotional codes customers can apply at checkout"""
    __tablename__ = "promo_codes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(20), unique=True, nullable=False)
    discount_type = Column(String(20))
    discount_value = Column(Numeric(10, 2))
    minimum_order = Column(Numeric(10, 2), default=0)
    valid_from = Column(DateTime)
    valid_until = Column(DateTime)
    active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
