"""Order notification collaborators"""

from abc import ABC, abstractmethod

from starlette.concurrency import run_in_threadpool

from restaurant_api.schemas.order import OrderSummary


class OrderNotifier(ABC):
    """Receives committed orders; delivery is best effort"""

    @abstractmethod
    async def order_placed(self, summary: OrderSummary) -> None:
        """Announce a committed order to the customer"""
        pass


class CeleryOrderNotifier(OrderNotifier):
    """Queues the confirmation email on the Celery worker"""

    async def order_placed(self, summary: OrderSummary) -> None:
        from restaurant_api.jobs.celery_app import celery_app

        # Publishing can block on the broker connection
        await run_in_threadpool(
            celery_app.send_task,
            "send_order_confirmation_email",
            args=[summary.model_dump(mode="json")],
        )


def get_notifier() -> OrderNotifier:
    """FastAPI dependency providing the order notifier"""
    return CeleryOrderNotifier()
