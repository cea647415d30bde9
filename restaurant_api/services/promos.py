"""Promo code evaluation

Looking a code up and applying it never changes stored state: there is no
redemption counter, so the same code can be applied any number of times.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.errors import ErrorCode
from restaurant_api.models.promo import PromoCode, DiscountType
from restaurant_api.schemas.promo import PromoResult

logger = structlog.get_logger()

CENTS = Decimal("0.01")

INVALID_OR_EXPIRED_MESSAGE = "Invalid or expired promo code"
MINIMUM_NOT_MET_MESSAGE = "Minimum order amount not met for this promo code"
APPLIED_MESSAGE = "Promo code applied successfully!"


def is_promo_valid(promo: PromoCode, now: datetime) -> bool:
    """Active and inside its validity window (both ends inclusive)"""
    if not promo.active:
        return False
    if promo.valid_from is None or promo.valid_until is None:
        return False
    return promo.valid_from <= now <= promo.valid_until


def calculate_discount(discount_type: str, discount_value: Decimal, total_amount: Decimal) -> Decimal:
    """Discount for a total, rounded to cents.

    Fixed discounts are not clamped to the total, so the final amount can go
    negative when a fixed discount exceeds it.
    """
    value = Decimal(discount_value or 0)
    if discount_type == DiscountType.PERCENTAGE.value:
        discount = total_amount * value / Decimal(100)
    else:
        discount = value
    return discount.quantize(CENTS, rounding=ROUND_HALF_UP)


def evaluate_promo(
    promo: Optional[PromoCode],
    total_amount: Decimal,
    now: datetime,
) -> PromoResult:
    """Decide eligibility and compute the discount for an already-loaded code"""
    if promo is None or not is_promo_valid(promo, now):
        return PromoResult(
            success=False,
            message=INVALID_OR_EXPIRED_MESSAGE,
            error=ErrorCode.INVALID_OR_EXPIRED,
        )

    minimum_order = Decimal(promo.minimum_order or 0)
    if total_amount < minimum_order:
        return PromoResult(
            success=False,
            message=MINIMUM_NOT_MET_MESSAGE,
            error=ErrorCode.MINIMUM_NOT_MET,
        )

    discount_amount = calculate_discount(promo.discount_type, promo.discount_value, total_amount)
    final_amount = (total_amount - discount_amount).quantize(CENTS, rounding=ROUND_HALF_UP)

    return PromoResult(
        success=True,
        message=APPLIED_MESSAGE,
        discount_amount=discount_amount,
        final_amount=final_amount,
    )


async def apply_promo(
    db: AsyncSession,
    code: str,
    total_amount: Decimal,
    now: Optional[datetime] = None,
) -> PromoResult:
    """Look up a promo code and evaluate it against a cart total"""
    now = now or datetime.utcnow()
    total_amount = Decimal(total_amount)

    try:
        result = await db.execute(select(PromoCode).where(PromoCode.code == code))
        promo = result.scalar_one_or_none()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Promo lookup failed", code=code)
        return PromoResult(
            success=False,
            message="Promo code could not be checked, please try again",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    outcome = evaluate_promo(promo, total_amount, now)

    logger.info(
        "Promo evaluated",
        code=code,
        total_amount=str(total_amount),
        success=outcome.success,
        error=outcome.error.value if outcome.error else None,
    )
    return outcome
