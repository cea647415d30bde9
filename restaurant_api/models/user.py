"""Customer account model"""

from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Enum, Integer, Text
from sqlalchemy.orm import relationship
import enum

from restaurant_api.database import Base


class UserRole(str, enum.Enum):
    """User roles"""
    CUSTOMER = "customer"
    ADMIN = "admin"


class User(Base):
    """Registered customers and staff administrators"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Authentication
    username = Column(String(50), unique=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    email = Column(String(100), unique=True, nullable=False)

    # Profile
    phone = Column(String(20))
    address = Column(Text)

    # Preferences
    favorite_item = Column(Integer, ForeignKey("menu_items.id"))
    delivery_notes = Column(Text)
    newsletter_subscription = Column(Boolean, default=False)

    # Role
    role = Column(Enum(UserRole), default=UserRole.CUSTOMER)

    # Status
    is_active = Column(Boolean, default=True)

    # Tokens
    refresh_token = Column(String(500))

    # Timestamps
    registration_date = Column(DateTime, default=datetime.utcnow)
    last_login = Column(DateTime)

    # Relationships
    orders = relationship("Order", back_populates="customer")
