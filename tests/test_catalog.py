"""Tests for menu, deals, offers, locations, announcements and feedback"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from restaurant_api.models.engagement import Feedback, Notification, NewsletterSubscriber
from restaurant_api.models.location import Location
from restaurant_api.services import catalog


@pytest.mark.asyncio
async def test_menu_by_category(client: AsyncClient, test_menu_items):
    response = await client.get("/menu_items", params={"category": "Sides"})

    assert response.status_code == 200
    items = response.json()
    assert [item["item_name"] for item in items] == ["Potato Wedges", "Rizo Rice"]
    assert Decimal(items[0]["price"]) == Decimal("20.00")


@pytest.mark.asyncio
async def test_menu_unknown_category_is_empty(client: AsyncClient, test_menu_items):
    response = await client.get("/menu_items", params={"category": "Desserts"})

    assert response.json() == []


@pytest.mark.asyncio
async def test_categories(client: AsyncClient, test_menu_items):
    response = await client.get("/menu_items/categories")

    assert response.json() == ["Sandwiches", "Sides", "Snacks"]


@pytest.mark.asyncio
async def test_search_is_case_insensitive(client: AsyncClient, test_menu_items):
    response = await client.get("/menu_items/search", params={"query": "WINGS"})

    data = response.json()
    assert data["total"] == 1
    assert data["items"][0]["item_name"] == "Hot Wings"


@pytest.mark.asyncio
async def test_search_matches_description(client: AsyncClient, test_menu_items):
    response = await client.get("/menu_items/search", params={"query": "ranch"})

    assert [item["item_name"] for item in response.json()["items"]] == ["Hot Wings"]


@pytest.mark.asyncio
async def test_deals_active_by_priority(client: AsyncClient, test_deals):
    response = await client.get("/deals")

    assert response.status_code == 200
    assert [deal["deal_name"] for deal in response.json()] == ["Family Feast", "Dinner Box", "Zinger Combo"]


@pytest.mark.asyncio
async def test_offers_only_running(client: AsyncClient, test_offers):
    response = await client.get("/offers")

    assert [offer["offer_name"] for offer in response.json()] == ["Ramadan Special"]


@pytest.mark.asyncio
async def test_offers_at_given_time(test_db, test_offers):
    later = datetime.utcnow() + timedelta(days=45)

    result = await catalog.get_offers(test_db, later)

    assert result.success is True
    assert [offer.offer_name for offer in result.items] == ["Next Month"]


@pytest.mark.asyncio
async def test_locations_grouped_by_city(client: AsyncClient, test_db):
    for name, city in [
        ("KFC Nasr City", "Cairo"),
        ("KFC Alexandria Corniche", "Alexandria"),
        ("KFC Downtown", "Cairo"),
    ]:
        test_db.add(Location(name=name, address=f"{name} address", city=city))
    await test_db.commit()

    response = await client.get("/locations")

    assert [loc["name"] for loc in response.json()] == [
        "KFC Alexandria Corniche",
        "KFC Downtown",
        "KFC Nasr City",
    ]


@pytest.mark.asyncio
async def test_notifications_newest_first_and_limited(client: AsyncClient, test_db):
    start = datetime.utcnow() - timedelta(days=10)
    for day in range(7):
        test_db.add(
            Notification(
                title=f"News {day}",
                message="Fresh from the kitchen",
                created_at=start + timedelta(days=day),
            )
        )
    test_db.add(Notification(title="Hidden", message="Draft", active=False, created_at=datetime.utcnow()))
    await test_db.commit()

    response = await client.get("/notifications")
    titles = [n["title"] for n in response.json()]
    assert titles == ["News 6", "News 5", "News 4", "News 3", "News 2"]

    response = await client.get("/notifications", params={"limit": 2})
    assert [n["title"] for n in response.json()] == ["News 6", "News 5"]


@pytest.mark.asyncio
async def test_feedback_for_existing_order(client: AsyncClient, test_db, test_menu_items, make_order):
    item = test_menu_items[0]
    placed = await client.post("/orders", json=make_order([(item.id, item.item_name, item.price, 1)]))
    order_id = placed.json()["order_id"]

    response = await client.post(f"/orders/{order_id}/feedback", json={"rating": 5, "comments": "Crispy!"})

    assert response.status_code == 201
    assert response.json()["message"] == "Thank you for your feedback!"
    stored = (await test_db.execute(select(Feedback).where(Feedback.order_id == order_id))).scalar_one()
    assert stored.rating == 5


@pytest.mark.asyncio
async def test_feedback_for_unknown_order(client: AsyncClient):
    response = await client.post("/orders/424242/feedback", json={"rating": 4})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_feedback_rating_out_of_range(client: AsyncClient):
    response = await client.post("/orders/1/feedback", json={"rating": 6})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_newsletter_subscription(client: AsyncClient, test_db):
    response = await client.post("/newsletter/subscribe", json={"email": "fan@example.com"})
    assert response.status_code == 201
    assert response.json()["message"] == "Successfully subscribed to newsletter!"

    duplicate = await client.post("/newsletter/subscribe", json={"email": "fan@example.com"})
    assert duplicate.status_code == 409

    stored = (await test_db.execute(select(NewsletterSubscriber))).scalars().all()
    assert [s.email for s in stored] == ["fan@example.com"]
