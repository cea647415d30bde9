"""Order API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.database import get_db
from restaurant_api.errors import raise_for_failure
from restaurant_api.models.user import UserRole
from restaurant_api.notifications.notifier import OrderNotifier, get_notifier
from restaurant_api.schemas.common import ActionResult
from restaurant_api.schemas.engagement import FeedbackBody, FeedbackCreate
from restaurant_api.schemas.order import (
    OrderCreate,
    OrderResult,
    OrderStatusResult,
    OrderStatusUpdate,
    OrderHistoryEntry,
)
from restaurant_api.security import AuthContext
from restaurant_api.services import orders, engagement
from restaurant_api.api.auth import get_current_context, get_optional_context, require_role

router = APIRouter()


@router.post("", response_model=OrderResult, status_code=201)
async def create_order(
    order_data: OrderCreate,
    context: Optional[AuthContext] = Depends(get_optional_context),
    notifier: OrderNotifier = Depends(get_notifier),
    db: AsyncSession = Depends(get_db),
):
    """Place an order; guests may check out without signing in"""
    result = await orders.place_order(db, order_data, notifier, context)
    raise_for_failure(result)
    return result


@router.get("/mine", response_model=List[OrderHistoryEntry])
async def list_my_orders(
    context: AuthContext = Depends(get_current_context),
    db: AsyncSession = Depends(get_db),
):
    """Order history of the signed-in customer"""
    result = await orders.list_customer_orders(db, context)
    raise_for_failure(result)
    return result.orders


@router.get("/{order_id}", response_model=OrderStatusResult)
async def get_order(
    order_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Track an order"""
    result = await orders.get_order_status(db, order_id)
    raise_for_failure(result)
    return result


@router.put("/{order_id}/status", response_model=ActionResult)
async def update_order_status(
    order_id: int,
    update: OrderStatusUpdate,
    context: AuthContext = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """Overwrite an order's status (admin only)"""
    result = await orders.update_order_status(db, order_id, update.status)
    raise_for_failure(result)
    return result


@router.post("/{order_id}/feedback", response_model=ActionResult, status_code=201)
async def submit_feedback(
    order_id: int,
    feedback: FeedbackBody,
    db: AsyncSession = Depends(get_db),
):
    """Rate an order"""
    result = await engagement.submit_feedback(
        db,
        FeedbackCreate(order_id=order_id, rating=feedback.rating, comments=feedback.comments),
    )
    raise_for_failure(result)
    return result
