"""Read-only catalog queries: menu, deals, offers, locations, notifications

Every query returns a CatalogResult. A storage failure is logged and
reported as a failed result with an empty item list.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.errors import ErrorCode
from restaurant_api.models.menu import MenuItem, Deal, SpecialOffer
from restaurant_api.models.location import Location
from restaurant_api.models.engagement import Notification
from restaurant_api.schemas.common import CatalogResult

logger = structlog.get_logger()


async def _fetch_all(db: AsyncSession, query, what: str) -> CatalogResult:
    try:
        result = await db.execute(query)
        items = list(result.scalars().all())
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Catalog query failed", catalog=what)
        return CatalogResult(
            success=False,
            message=f"Could not load {what}, please try again",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    return CatalogResult(success=True, message=f"{len(items)} {what} found", items=items)


async def get_menu(db: AsyncSession, category: Optional[str] = None) -> CatalogResult:
    query = select(MenuItem)

    if category:
        query = query.where(MenuItem.category == category)

    query = query.order_by(MenuItem.item_name)

    return await _fetch_all(db, query, "menu items")


async def get_categories(db: AsyncSession) -> CatalogResult:
    query = (
        select(MenuItem.category)
        .where(MenuItem.category.is_not(None))
        .distinct()
        .order_by(MenuItem.category)
    )
    return await _fetch_all(db, query, "categories")


async def search_menu(db: AsyncSession, term: str) -> CatalogResult:
    """Menu items whose name or description contains the term"""
    search_term = f"%{term}%"

    query = (
        select(MenuItem)
        .where(
            or_(
                MenuItem.item_name.ilike(search_term),
                MenuItem.description.ilike(search_term),
            )
        )
        .order_by(MenuItem.item_name)
    )
    return await _fetch_all(db, query, "menu items")


async def get_deals(db: AsyncSession) -> CatalogResult:
    query = select(Deal).where(Deal.active == True).order_by(Deal.priority.desc(), Deal.id)
    return await _fetch_all(db, query, "deals")


async def get_offers(db: AsyncSession, now: Optional[datetime] = None) -> CatalogResult:
    """Active special offers running right now"""
    now = now or datetime.utcnow()

    query = (
        select(SpecialOffer)
        .where(
            SpecialOffer.active == True,
            SpecialOffer.start_date <= now,
            SpecialOffer.end_date >= now,
        )
        .order_by(SpecialOffer.priority.desc(), SpecialOffer.id)
    )
    return await _fetch_all(db, query, "offers")


async def get_locations(db: AsyncSession) -> CatalogResult:
    query = select(Location).order_by(Location.city, Location.name)
    return await _fetch_all(db, query, "locations")


async def get_notifications(db: AsyncSession, limit: int = 5) -> CatalogResult:
    query = (
        select(Notification)
        .where(Notification.active == True)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(limit)
    )
    return await _fetch_all(db, query, "notifications")
