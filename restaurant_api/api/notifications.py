"""Announcements and newsletter endpoints"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.config import settings
from restaurant_api.database import get_db
from restaurant_api.errors import raise_for_failure
from restaurant_api.schemas.common import ActionResult
from restaurant_api.schemas.engagement import NotificationResponse, NewsletterSubscribe
from restaurant_api.services import catalog, engagement

router = APIRouter()


@router.get("/notifications", response_model=List[NotificationResponse])
async def list_notifications(
    limit: int = Query(settings.notifications_default_limit, ge=1, le=50),
    db: AsyncSession = Depends(get_db),
):
    """Most recent active announcements"""
    result = await catalog.get_notifications(db, limit)
    raise_for_failure(result)
    return result.items


@router.post("/newsletter/subscribe", response_model=ActionResult, status_code=201)
async def subscribe_newsletter(
    request: NewsletterSubscribe,
    db: AsyncSession = Depends(get_db),
):
    """Add an email address to the newsletter list"""
    result = await engagement.subscribe_newsletter(db, request.email)
    raise_for_failure(result)
    return result
