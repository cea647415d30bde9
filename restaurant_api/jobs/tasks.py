"""Background job tasks"""

import structlog

from restaurant_api.jobs.celery_app import celery_app
from restaurant_api.notifications import email
from restaurant_api.schemas.order import OrderSummary

logger = structlog.get_logger()


@celery_app.task(name="send_order_confirmation_email")
def send_order_confirmation_email(summary_data: dict):
    """Render and send the order confirmation email"""
    summary = OrderSummary.model_validate(summary_data)
    logger.info("Sending order confirmation", order_id=summary.order_id)

    subject, html = email.render_order_confirmation(summary)

    try:
        email.send_email(summary.email, subject, html)
    except Exception as e:
        logger.error(
            "Failed to send order confirmation",
            order_id=summary.order_id,
            error=str(e),
        )
        raise

    logger.info("Order confirmation sent", order_id=summary.order_id)
