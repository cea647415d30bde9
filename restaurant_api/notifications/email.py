"""Order confirmation email rendering and SMTP delivery"""

import smtplib
from email.message import EmailMessage
from email.utils import formataddr
from pathlib import Path
from typing import Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
import structlog

from restaurant_api.config import settings
from restaurant_api.schemas.order import OrderSummary

logger = structlog.get_logger()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def format_money(amount) -> str:
    return f"{settings.currency} {amount:,.2f}"


env.filters["money"] = format_money


def render_template(template_path: str, **context) -> str:
    template = env.get_template(template_path)
    return template.render(**context)


def render_order_confirmation(summary: OrderSummary) -> Tuple[str, str]:
    """Subject line and HTML body for an order confirmation"""
    subject = f"{settings.restaurant_name} - Order Confirmation #{summary.order_id}"
    html = render_template(
        "order_confirmation.html",
        order=summary,
        restaurant_name=settings.restaurant_name,
        support_phone=settings.support_phone,
        delivery_estimate=settings.delivery_estimate,
    )
    return subject, html


def send_email(to: str, subject: str, html: str) -> None:
    """Send an HTML email through the configured SMTP relay"""
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = formataddr((settings.restaurant_name, settings.mail_from))
    msg["To"] = to
    msg.set_content("Please view this message in an HTML-capable mail client.")
    msg.add_alternative(html, subtype="html")

    with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=settings.smtp_timeout_seconds) as server:
        if settings.smtp_use_tls:
            server.starttls()
        if settings.smtp_username:
            server.login(settings.smtp_username, settings.smtp_password)
        server.send_message(msg)

    logger.info("Email sent", subject=subject)
