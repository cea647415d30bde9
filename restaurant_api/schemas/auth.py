"""Authentication schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from restaurant_api.models.user import UserRole
from restaurant_api.schemas.common import ActionResult


class Token(BaseModel):
    """JWT token response"""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class RefreshRequest(BaseModel):
    """Token refresh request"""
    refresh_token: str


class UserCreate(BaseModel):
    """Registration request"""
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = None


class PreferencesUpdate(BaseModel):
    """Customer preferences"""
    favorite_item: Optional[int] = None
    delivery_notes: Optional[str] = None
    newsletter_subscription: bool = False


class UserResponse(BaseModel):
    """User response"""
    id: int
    username: str
    email: str
    phone: Optional[str]
    address: Optional[str]
    favorite_item: Optional[int]
    delivery_notes: Optional[str]
    newsletter_subscription: bool
    role: UserRole
    registration_date: datetime
    last_login: Optional[datetime]

    class Config:
        from_attributes = True


class RegisterResult(ActionResult):
    """Outcome of registration"""
    user_id: Optional[int] = None


class LoginResult(ActionResult):
    """Outcome of a login or token refresh"""
    token: Optional[Token] = None
