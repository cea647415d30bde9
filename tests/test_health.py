"""Tests for the health endpoints"""

import threading
from contextlib import asynccontextmanager

import pytest
from httpx import AsyncClient

from restaurant_api import database
from restaurant_api.jobs.celery_app import celery_app


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_readiness_pings_broker_off_the_event_loop(client: AsyncClient, test_db, monkeypatch):
    loop_thread = threading.get_ident()
    ping_threads = []

    @asynccontextmanager
    async def session():
        yield test_db

    def ping(timeout):
        ping_threads.append(threading.get_ident())
        return [{"worker@kitchen": {"ok": "pong"}}]

    monkeypatch.setattr(database, "SessionLocal", session)
    monkeypatch.setattr(celery_app.control, "ping", ping)

    response = await client.get("/health/ready")

    assert response.json() == {"status": "ready", "checks": {"database": "ok", "redis": "ok"}}
    assert len(ping_threads) == 1
    assert ping_threads[0] != loop_thread


@pytest.mark.asyncio
async def test_readiness_reports_broker_failure(client: AsyncClient, test_db, monkeypatch):
    @asynccontextmanager
    async def session():
        yield test_db

    def ping(timeout):
        raise ConnectionRefusedError("redis down")

    monkeypatch.setattr(database, "SessionLocal", session)
    monkeypatch.setattr(celery_app.control, "ping", ping)

    response = await client.get("/health/ready")

    assert response.json()["status"] == "not_ready"
    assert response.json()["checks"]["redis"] == "failed"
