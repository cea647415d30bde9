"""Action-style endpoints used by the storefront.

`GET /?action=...` serves reads and `POST /` with an `action` form field
serves writes. Every action is a member of a closed enum and maps to
exactly one handler; responses are always JSON results with HTTP 200.
"""

import enum
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type

from fastapi import APIRouter, Depends, Form, Query, Request
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.config import settings
from restaurant_api.database import get_db
from restaurant_api.errors import ErrorCode
from restaurant_api.models.order import OrderStatus
from restaurant_api.notifications.notifier import OrderNotifier, get_notifier
from restaurant_api.schemas.auth import UserCreate, PreferencesUpdate, RegisterResult, LoginResult
from restaurant_api.schemas.common import ActionResult, CatalogResult
from restaurant_api.schemas.engagement import FeedbackCreate, NewsletterSubscribe, NotificationResponse
from restaurant_api.schemas.location import LocationResponse
from restaurant_api.schemas.menu import MenuItemResponse, DealResponse, SpecialOfferResponse
from restaurant_api.schemas.order import OrderCreate, OrderResult, OrderStatusResult
from restaurant_api.schemas.promo import PromoApplyRequest, PromoResult
from restaurant_api.security import AuthContext
from restaurant_api.services import accounts, catalog, engagement, orders, promos
from restaurant_api.api.auth import get_optional_context

router = APIRouter()
logger = structlog.get_logger()


class ReadAction(str, enum.Enum):
    GET_MENU = "get_menu"
    GET_DEALS = "get_deals"
    GET_LOCATIONS = "get_locations"
    GET_CATEGORIES = "get_categories"
    GET_OFFERS = "get_offers"
    SEARCH_MENU = "search_menu"
    GET_ORDER_STATUS = "get_order_status"
    GET_NOTIFICATIONS = "get_notifications"


class WriteAction(str, enum.Enum):
    PROCESS_ORDER = "process_order"
    REGISTER = "register"
    LOGIN = "login"
    LOGOUT = "logout"
    UPDATE_ORDER_STATUS = "update_order_status"
    UPDATE_PREFERENCES = "update_preferences"
    SUBMIT_FEEDBACK = "submit_feedback"
    APPLY_PROMO = "apply_promo"
    SUBSCRIBE_NEWSLETTER = "subscribe_newsletter"


@dataclass
class ActionRequest:
    """Everything a handler may need for one dispatched action"""
    params: Mapping[str, Any]
    db: AsyncSession
    context: Optional[AuthContext]
    notifier: OrderNotifier

    def get(self, key: str) -> Optional[str]:
        """Parameter value with blanks treated as missing"""
        value = self.params.get(key)
        if value is None:
            return None
        value = str(value).strip()
        return value or None


ActionHandler = Callable[[ActionRequest], Awaitable[Any]]


def _invalid(result_cls: Type[ActionResult], message: str) -> ActionResult:
    return result_cls(success=False, message=message, error=ErrorCode.VALIDATION_ERROR)


def _sign_in_required(result_cls: Type[ActionResult] = ActionResult) -> ActionResult:
    return result_cls(success=False, message="Please log in first", error=ErrorCode.UNAUTHORIZED)


def _parse_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


# Reads

def _rows(result: CatalogResult, schema: Type[BaseModel]):
    """Successful catalog rows as response models; a failed result is returned as is"""
    if not result.success:
        return result
    return [schema.model_validate(row) for row in result.items]


async def _get_menu(req: ActionRequest):
    return _rows(await catalog.get_menu(req.db, req.get("category")), MenuItemResponse)


async def _get_deals(req: ActionRequest):
    return _rows(await catalog.get_deals(req.db), DealResponse)


async def _get_locations(req: ActionRequest):
    return _rows(await catalog.get_locations(req.db), LocationResponse)


async def _get_categories(req: ActionRequest):
    result = await catalog.get_categories(req.db)
    return result.items if result.success else result


async def _get_offers(req: ActionRequest):
    return _rows(await catalog.get_offers(req.db), SpecialOfferResponse)


async def _search_menu(req: ActionRequest):
    return _rows(await catalog.search_menu(req.db, req.get("search") or ""), MenuItemResponse)


async def _get_order_status(req: ActionRequest):
    order_id = _parse_int(req.get("order_id"))
    if order_id is None:
        return _invalid(OrderStatusResult, "A numeric order_id is required")
    return await orders.get_order_status(req.db, order_id)


async def _get_notifications(req: ActionRequest):
    limit = settings.notifications_default_limit
    if req.get("limit") is not None:
        limit = _parse_int(req.get("limit"))
        if limit is None or not 1 <= limit <= 50:
            return _invalid(CatalogResult, "limit must be a number from 1 to 50")
    return _rows(await catalog.get_notifications(req.db, limit), NotificationResponse)


# Writes

async def _process_order(req: ActionRequest):
    raw_order = req.get("order")
    if raw_order is None:
        return _invalid(OrderResult, "Order details are missing")

    try:
        order_data = OrderCreate.model_validate_json(raw_order)
    except ValidationError as e:
        logger.info("Rejected malformed order", errors=e.error_count())
        return _invalid(OrderResult, "Order is missing required fields or contains invalid values")

    return await orders.place_order(req.db, order_data, req.notifier, req.context)


async def _register(req: ActionRequest):
    try:
        user_data = UserCreate(
            username=req.get("username"),
            password=req.get("password"),
            email=req.get("email"),
            phone=req.get("phone"),
            address=req.get("address"),
        )
    except ValidationError:
        return _invalid(RegisterResult, "Username, password and a valid email are required")

    return await accounts.register_user(req.db, user_data)


async def _login(req: ActionRequest):
    username = req.get("username")
    password = req.get("password")
    if not username or not password:
        return _invalid(LoginResult, "Username and password are required")
    return await accounts.authenticate(req.db, username, password)


async def _logout(req: ActionRequest):
    if req.context is None:
        return ActionResult(success=True, message="Logout successful!")
    return await accounts.logout(req.db, req.context)


async def _update_order_status(req: ActionRequest):
    if req.context is None:
        return _sign_in_required()
    if not req.context.is_admin:
        return ActionResult(success=False, message="Insufficient permissions", error=ErrorCode.FORBIDDEN)

    order_id = _parse_int(req.get("order_id"))
    try:
        new_status = OrderStatus(req.get("status"))
    except ValueError:
        new_status = None

    if order_id is None or new_status is None:
        return _invalid(ActionResult, "A numeric order_id and a known status are required")

    return await orders.update_order_status(req.db, order_id, new_status)


async def _update_preferences(req: ActionRequest):
    if req.context is None:
        return _sign_in_required()

    try:
        preferences = PreferencesUpdate(
            favorite_item=req.get("favorite_item"),
            delivery_notes=req.get("delivery_notes"),
            newsletter_subscription=req.get("newsletter_subscription") or False,
        )
    except ValidationError:
        return _invalid(ActionResult, "Preferences contain invalid values")

    return await accounts.update_preferences(req.db, req.context, preferences)


async def _submit_feedback(req: ActionRequest):
    try:
        feedback = FeedbackCreate(
            order_id=req.get("order_id"),
            rating=req.get("rating"),
            comments=req.get("comments"),
        )
    except ValidationError:
        return _invalid(ActionResult, "A valid order_id and a rating from 1 to 5 are required")

    return await engagement.submit_feedback(req.db, feedback)


async def _apply_promo(req: ActionRequest):
    try:
        request = PromoApplyRequest(
            promo_code=req.get("promo_code"),
            total_amount=req.get("total_amount"),
        )
    except ValidationError:
        return _invalid(PromoResult, "A promo code and a valid total amount are required")

    return await promos.apply_promo(req.db, request.promo_code, request.total_amount)


async def _subscribe_newsletter(req: ActionRequest):
    try:
        request = NewsletterSubscribe(email=req.get("email"))
    except ValidationError:
        return _invalid(ActionResult, "A valid email address is required")

    return await engagement.subscribe_newsletter(req.db, request.email)


READ_HANDLERS: Dict[ReadAction, ActionHandler] = {
    ReadAction.GET_MENU: _get_menu,
    ReadAction.GET_DEALS: _get_deals,
    ReadAction.GET_LOCATIONS: _get_locations,
    ReadAction.GET_CATEGORIES: _get_categories,
    ReadAction.GET_OFFERS: _get_offers,
    ReadAction.SEARCH_MENU: _search_menu,
    ReadAction.GET_ORDER_STATUS: _get_order_status,
    ReadAction.GET_NOTIFICATIONS: _get_notifications,
}

WRITE_HANDLERS: Dict[WriteAction, ActionHandler] = {
    WriteAction.PROCESS_ORDER: _process_order,
    WriteAction.REGISTER: _register,
    WriteAction.LOGIN: _login,
    WriteAction.LOGOUT: _logout,
    WriteAction.UPDATE_ORDER_STATUS: _update_order_status,
    WriteAction.UPDATE_PREFERENCES: _update_preferences,
    WriteAction.SUBMIT_FEEDBACK: _submit_feedback,
    WriteAction.APPLY_PROMO: _apply_promo,
    WriteAction.SUBSCRIBE_NEWSLETTER: _subscribe_newsletter,
}


def ensure_exhaustive(actions: Type[enum.Enum], handlers: Mapping) -> None:
    """Fail at import time if an action has no handler"""
    missing = [action.value for action in actions if action not in handlers]
    if missing:
        raise RuntimeError(f"No handler registered for actions: {', '.join(missing)}")


ensure_exhaustive(ReadAction, READ_HANDLERS)
ensure_exhaustive(WriteAction, WRITE_HANDLERS)


@router.get("/")
async def dispatch_read(
    request: Request,
    action: ReadAction = Query(...),
    context: Optional[AuthContext] = Depends(get_optional_context),
    notifier: OrderNotifier = Depends(get_notifier),
    db: AsyncSession = Depends(get_db),
):
    """Run a read action"""
    logger.info("Action dispatched", action=action.value)
    handler = READ_HANDLERS[action]
    return await handler(ActionRequest(params=request.query_params, db=db, context=context, notifier=notifier))


@router.post("/")
async def dispatch_write(
    request: Request,
    action: WriteAction = Form(...),
    context: Optional[AuthContext] = Depends(get_optional_context),
    notifier: OrderNotifier = Depends(get_notifier),
    db: AsyncSession = Depends(get_db),
):
    """Run a write action submitted as a form"""
    logger.info("Action dispatched", action=action.value)
    form = await request.form()
    handler = WRITE_HANDLERS[action]
    return await handler(ActionRequest(params=form, db=db, context=context, notifier=notifier))
