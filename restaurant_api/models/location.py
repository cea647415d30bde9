"""Restaurant branch model"""

from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Numeric, Text

from restaurant_api.database import Base


class Location(Base):
    """Branches shown in the store locator"""
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    address = Column(Text, nullable=False)
    city = Column(String(50), nullable=False)
    phone = Column(String(20))
    opening_hours = Column(String(100))  # "10:00 AM - 12:00 AM"
    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))
    image_url = Column(String(255), default="/images/default-location.jpg")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
