"""Feedback, notification and newsletter schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class FeedbackCreate(BaseModel):
    """Rating for a placed order"""
    order_id: int
    rating: int = Field(ge=1, le=5)
    comments: Optional[str] = None


class FeedbackBody(BaseModel):
    """Feedback body when the order id comes from the path"""
    rating: int = Field(ge=1, le=5)
    comments: Optional[str] = None


class NotificationResponse(BaseModel):
    """Announcement shown in the notification bell"""
    id: int
    title: str
    message: str
    image_url: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class NewsletterSubscribe(BaseModel):
    """Newsletter sign-up"""
    email: EmailStr
