"""Order feedback and newsletter sign-up"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.errors import ErrorCode
from restaurant_api.models.engagement import Feedback, NewsletterSubscriber
from restaurant_api.models.order import Order
from restaurant_api.schemas.common import ActionResult
from restaurant_api.schemas.engagement import FeedbackCreate

logger = structlog.get_logger()


async def submit_feedback(db: AsyncSession, feedback: FeedbackCreate) -> ActionResult:
    try:
        result = await db.execute(select(Order.id).where(Order.id == feedback.order_id))
        if result.scalar_one_or_none() is None:
            return ActionResult(success=False, message="Order not found", error=ErrorCode.NOT_FOUND)

        db.add(
            Feedback(
                order_id=feedback.order_id,
                rating=feedback.rating,
                comments=feedback.comments,
                submission_date=datetime.utcnow(),
            )
        )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Feedback submission failed", order_id=feedback.order_id)
        return ActionResult(
            success=False,
            message="Error submitting feedback",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    logger.info("Feedback submitted", order_id=feedback.order_id, rating=feedback.rating)
    return ActionResult(success=True, message="Thank you for your feedback!")


async def subscribe_newsletter(db: AsyncSession, email: str) -> ActionResult:
    db.add(NewsletterSubscriber(email=email, subscription_date=datetime.utcnow()))

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        return ActionResult(
            success=False,
            message="This email is already subscribed",
            error=ErrorCode.CONFLICT,
        )
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Newsletter subscription failed")
        return ActionResult(
            success=False,
            message="Error subscribing to newsletter",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    return ActionResult(success=True, message="Successfully subscribed to newsletter!")
