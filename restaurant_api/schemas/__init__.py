"""Pydantic schemas for request/response validation"""

from restaurant_api.schemas.common import ActionResult, CatalogResult
from restaurant_api.schemas.auth import (
    Token,
    RefreshRequest,
    UserCreate,
    UserResponse,
    PreferencesUpdate,
    RegisterResult,
    LoginResult,
)
from restaurant_api.schemas.menu import (
    MenuItemResponse,
    MenuSearchResult,
    DealResponse,
    SpecialOfferResponse,
)
from restaurant_api.schemas.location import LocationResponse
from restaurant_api.schemas.order import (
    OrderItemCreate,
    OrderCreate,
    OrderResult,
    OrderStatusUpdate,
    OrderStatusResult,
    OrderHistoryEntry,
    OrderHistoryResult,
    OrderSummary,
)
from restaurant_api.schemas.promo import PromoApplyRequest, PromoResult
from restaurant_api.schemas.engagement import (
    FeedbackCreate,
    FeedbackBody,
    NotificationResponse,
    NewsletterSubscribe,
)

__all__ = [
    "ActionResult",
    "CatalogResult",
    "Token",
    "RefreshRequest",
    "UserCreate",
    "UserResponse",
    "PreferencesUpdate",
    "RegisterResult",
    "LoginResult",
    "MenuItemResponse",
    "MenuSearchResult",
    "DealResponse",
    "SpecialOfferResponse",
    "LocationResponse",
    "OrderItemCreate",
    "OrderCreate",
    "OrderResult",
    "OrderStatusUpdate",
    "OrderStatusResult",
    "OrderHistoryEntry",
    "OrderHistoryResult",
    "OrderSummary",
    "PromoApplyRequest",
    "PromoResult",
    "FeedbackCreate",
    "FeedbackBody",
    "NotificationResponse",
    "NewsletterSubscribe",
]
