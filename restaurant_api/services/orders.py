"""Order placement, tracking and status updates

An order header and its line items are written in one transaction. The
confirmation is handed to the notifier only after commit, and a failing
notifier never undoes or fails the order.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from restaurant_api.errors import ErrorCode
from restaurant_api.models.menu import MenuItem
from restaurant_api.models.order import Order, OrderItem, OrderStatus
from restaurant_api.notifications.notifier import OrderNotifier
from restaurant_api.schemas.common import ActionResult
from restaurant_api.schemas.order import (
    OrderCreate,
    OrderResult,
    OrderHeader,
    OrderLine,
    OrderStatusResult,
    OrderHistoryEntry,
    OrderHistoryResult,
    OrderSummary,
    OrderSummaryLine,
)
from restaurant_api.security import AuthContext

logger = structlog.get_logger()


def _build_summary(order_id: int, order_data: OrderCreate) -> OrderSummary:
    return OrderSummary(
        order_id=order_id,
        email=order_data.email,
        delivery_address=order_data.delivery_address,
        phone=order_data.phone,
        payment_method=order_data.payment_method,
        total_amount=order_data.total_amount,
        lines=[
            OrderSummaryLine(
                name=item.name or f"Item #{item.item_id}",
                quantity=item.quantity,
                price=item.price,
            )
            for item in order_data.items
        ],
    )


async def place_order(
    db: AsyncSession,
    order_data: OrderCreate,
    notifier: OrderNotifier,
    context: Optional[AuthContext] = None,
) -> OrderResult:
    """Persist an order with its line items, then queue the confirmation"""
    customer_id = context.user_id if context else None

    # The submitted total is trusted; a mismatch is only reported.
    line_total = sum((item.price * item.quantity for item in order_data.items), Decimal("0"))
    if line_total != order_data.total_amount:
        logger.warning(
            "Order total differs from line items",
            submitted_total=str(order_data.total_amount),
            line_total=str(line_total),
        )

    try:
        order = Order(
            customer_id=customer_id,
            order_date=datetime.utcnow(),
            delivery_address=order_data.delivery_address,
            phone=order_data.phone,
            email=order_data.email,
            total_amount=order_data.total_amount,
            payment_method=order_data.payment_method,
            status=OrderStatus.PENDING.value,
        )
        db.add(order)
        await db.flush()
        order_id = order.id

        for item in order_data.items:
            db.add(
                OrderItem(
                    order_id=order_id,
                    item_id=item.item_id,
                    quantity=item.quantity,
                    price=item.price,
                )
            )

        await db.flush()
        await db.commit()

    except IntegrityError:
        await db.rollback()
        logger.exception("Order rejected by a database constraint", item_count=len(order_data.items))
        return OrderResult(
            success=False,
            message="Order could not be placed: it references an unknown menu item or customer",
            error=ErrorCode.CONFLICT,
        )
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Order transaction failed", item_count=len(order_data.items))
        return OrderResult(
            success=False,
            message="Order could not be processed, please try again",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    logger.info(
        "Order placed",
        order_id=order_id,
        customer_id=customer_id,
        item_count=len(order_data.items),
    )

    try:
        await notifier.order_placed(_build_summary(order_id, order_data))
    except Exception as e:
        logger.error("Failed to queue order confirmation", order_id=order_id, error=str(e))

    return OrderResult(
        success=True,
        order_id=order_id,
        message="Order placed successfully!",
    )


async def get_order_status(db: AsyncSession, order_id: int) -> OrderStatusResult:
    """Order header plus line items joined with the current menu"""
    try:
        result = await db.execute(select(Order).where(Order.id == order_id))
        order = result.scalar_one_or_none()

        if not order:
            return OrderStatusResult(
                success=False,
                message="Order not found",
                error=ErrorCode.NOT_FOUND,
            )

        items_result = await db.execute(
            select(
                OrderItem.quantity,
                OrderItem.price,
                MenuItem.item_name,
                MenuItem.description,
            )
            .join(MenuItem, OrderItem.item_id == MenuItem.id)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        )
        rows = items_result.all()
    except SQLAlchemyError:
        logger.exception("Order lookup failed", order_id=order_id)
        return OrderStatusResult(
            success=False,
            message="Order status is unavailable, please try again",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    return OrderStatusResult(
        success=True,
        message="Order found",
        order=OrderHeader.model_validate(order),
        items=[
            OrderLine(
                item_name=row.item_name,
                description=row.description,
                quantity=row.quantity,
                price=row.price,
            )
            for row in rows
        ],
    )


async def update_order_status(
    db: AsyncSession,
    order_id: int,
    new_status: OrderStatus,
) -> ActionResult:
    """Overwrite an order's status.

    Any status may follow any other, including moving a delivered order back
    to pending.
    """
    try:
        result = await db.execute(
            update(Order)
            .where(Order.id == order_id)
            .values(status=new_status.value, updated_at=datetime.utcnow())
        )
        if result.rowcount == 0:
            await db.rollback()
            return ActionResult(
                success=False,
                message="Order not found",
                error=ErrorCode.NOT_FOUND,
            )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Order status update failed", order_id=order_id)
        return ActionResult(
            success=False,
            message="Error updating order status",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    logger.info("Order status updated", order_id=order_id, status=new_status.value)
    return ActionResult(success=True, message="Order status updated successfully!")


async def list_customer_orders(db: AsyncSession, context: AuthContext) -> OrderHistoryResult:
    """Signed-in customer's previous orders, newest first"""
    try:
        result = await db.execute(
            select(Order)
            .where(Order.customer_id == context.user_id)
            .order_by(Order.order_date.desc(), Order.id.desc())
        )
        history = [OrderHistoryEntry.model_validate(order) for order in result.scalars().all()]
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Order history lookup failed", user_id=context.user_id)
        return OrderHistoryResult(
            success=False,
            message="Error retrieving order history",
            error=ErrorCode.TRANSACTION_FAILURE,
        )

    return OrderHistoryResult(success=True, message=f"{len(history)} orders found", orders=history)
