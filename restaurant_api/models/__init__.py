"""Database models"""

from restaurant_api.models.menu import MenuItem, Deal, SpecialOffer
from restaurant_api.models.location import Location
from restaurant_api.models.user import User, UserRole
from restaurant_api.models.order import Order, OrderItem, OrderStatus
from restaurant_api.models.promo import PromoCode, DiscountType
from restaurant_api.models.engagement import Feedback, Notification, NewsletterSubscriber

__all__ = [
    "MenuItem",
    "Deal",
    "SpecialOffer",
    "Location",
    "User",
    "UserRole",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PromoCode",
    "DiscountType",
    "Feedback",
    "Notification",
    "NewsletterSubscriber",
]
