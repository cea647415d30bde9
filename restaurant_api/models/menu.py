"""Menu-related models"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Numeric, Text

from restaurant_api.database import Base


class MenuItem(Base):
    """Menu items"""
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_name = Column(String(100), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(50))  # Chicken, Sandwiches, Meals, Sides, Drinks, etc.
    image_url = Column(String(255))
    calories = Column(Integer)
    available = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Deal(Base):
    """Bundled deals shown on the landing page"""
    __tablename__ = "deals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    deal_name = Column(String(100), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String(255))
    active = Column(Boolean, default=True)
    priority = Column(Integer, default=0)  # Higher shows first
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SpecialOffer(Base):
    """Time-boxed special offers"""
    __tablename__ = "special_offers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    offer_name = Column(String(100), nullable=False)
    description = Column(Text)
    discount_type = Column(String(20))  # percentage, fixed
    discount_value = Column(Numeric(10, 2))
    start_date = Column(DateTime)
    end_date = Column(DateTime)
    active = Column(Boolean, default=True)
    priority = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
