"""Celery application configuration"""

from celery import Celery
from restaurant_api.config import settings

# Create Celery app
celery_app = Celery(
    "restaurant_api",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "restaurant_api.jobs.tasks",
    ],
)

# Configure Celery
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=120,  # 2 minutes
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,

    # Publishing gives up after roughly a second when the broker is down
    task_publish_retry_policy={
        "max_retries": 2,
        "interval_start": 0,
        "interval_step": 0.5,
        "interval_max": 1,
    },
)
