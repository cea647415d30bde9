#!/usr/bin/env python3
"""
Seed script to create the demo menu, deals, branches and promo codes
"""

import asyncio
from datetime import datetime
from decimal import Decimal

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from restaurant_api.database import SessionLocal, engine, Base
    from restaurant_api.models.menu import MenuItem, Deal
    from restaurant_api.models.location import Location
    from restaurant_api.models.promo import PromoCode, DiscountType
    from restaurant_api.models.user import User, UserRole

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        # Check if demo data already exists
        result = await db.execute(select(MenuItem).limit(1))
        if result.scalar_one_or_none():
            print("Demo data already exists. Skipping...")
            return

        print("Creating menu items...")

        menu_items = [
            {"item_name": "Original Recipe Chicken", "description": "Classic fried chicken made with the secret recipe of 11 herbs and spices", "price": "25.00", "category": "Chicken", "image_url": "/images/original-recipe.jpg", "calories": 300},
            {"item_name": "Zinger Sandwich", "description": "Extra crispy and spicy chicken fillet with mayo and lettuce", "price": "35.00", "category": "Sandwiches", "image_url": "/images/zinger.jpg", "calories": 450},
            {"item_name": "Twister Wrap", "description": "Tender chicken strips with fresh veggies wrapped in tortilla", "price": "40.00", "category": "Wraps", "image_url": "/images/twister.jpg", "calories": 520},
            {"item_name": "Family Feast", "description": "10pc chicken, 4 portions of fries, coleslaw, and 2L drink", "price": "199.00", "category": "Meals", "image_url": "/images/family-feast.jpg", "calories": 2400},
            {"item_name": "Dinner Box", "description": "4pc chicken, 2 portions of fries, and a drink", "price": "85.00", "category": "Meals", "image_url": "/images/dinner-box.jpg", "calories": 1200},
            {"item_name": "Hot Wings", "description": "Spicy chicken wings served with ranch sauce", "price": "30.00", "category": "Snacks", "image_url": "/images/hot-wings.jpg", "calories": 350},
            {"item_name": "Potato Wedges", "description": "Crispy potato wedges with a hint of spices", "price": "20.00", "category": "Sides", "image_url": "/images/potato-wedges.jpg", "calories": 250},
            {"item_name": "Pepsi 1L", "description": "Refreshing Pepsi drink", "price": "15.00", "category": "Drinks", "image_url": "/images/pepsi-1L.jpg", "calories": 150},
            {"item_name": "Rizo Rice", "description": "Fluffy rice with a hint of spices, perfect as a side dish", "price": "10.00", "category": "Sides", "image_url": "/images/rizo-rice.jpg", "calories": 200},
        ]

        for item_data in menu_items:
            db.add(MenuItem(
                item_name=item_data["item_name"],
                description=item_data["description"],
                price=Decimal(item_data["price"]),
                category=item_data["category"],
                image_url=item_data["image_url"],
                calories=item_data["calories"],
                available=True,
            ))

        print("Creating deals...")

        deals = [
            ("Family Feast", "10pc chicken, 4 portions of fries, coleslaw, and 2L drink", "599.00", "/images/family-feast.jpg", 3),
            ("Dinner Box", "4pc chicken, 2 portions of fries, and a drink", "125.00", "/images/dinner-box.jpg", 2),
            ("Zinger Combo", "Zinger sandwich with fries and a drink", "150.00", "/images/zinger.jpg", 1),
            ("Potato Wedges", "Crispy potato wedges with a hint of spices", "20.00", "/images/potato-wedges.jpg", 0),
        ]

        for name, description, price, image_url, priority in deals:
            db.add(Deal(
                deal_name=name,
                description=description,
                price=Decimal(price),
                image_url=image_url,
                active=True,
                priority=priority,
            ))

        print("Creating locations...")

        locations = [
            ("KFC Nasr City", "123 Abbas El Akkad St., Nasr City", "Cairo", "02-24000000", "10:00 AM - 12:00 AM", "30.055166", "31.341267", "/images/giza-pyramids-mall.jpg"),
            ("KFC Downtown", "45 Talaat Harb St., Downtown", "Cairo", "02-25000000", "10:00 AM - 2:00 AM", "30.046511", "31.241234", "/images/cairo-downtown.jpg"),
            ("KFC Alexandria Corniche", "22 Corniche Road, San Stefano", "Alexandria", "03-5000000", "10:00 AM - 1:00 AM", "31.245165", "29.976543", "/images/alexandria-mall.jpg"),
        ]

        for name, address, city, phone, hours, lat, lng, image_url in locations:
            db.add(Location(
                name=name,
                address=address,
                city=city,
                phone=phone,
                opening_hours=hours,
                latitude=Decimal(lat),
                longitude=Decimal(lng),
                image_url=image_url,
            ))

        print("Creating promo codes...")

        # Valid for the whole current calendar year
        year = datetime.utcnow().year
        valid_from = datetime(year, 1, 1)
        valid_until = datetime(year, 12, 31, 23, 59, 59)

        db.add(PromoCode(
            code="WELCOME10",
            discount_type=DiscountType.PERCENTAGE.value,
            discount_value=Decimal("10.00"),
            minimum_order=Decimal("50.00"),
            valid_from=valid_from,
            valid_until=valid_until,
        ))
        db.add(PromoCode(
            code="FLAT15",
            discount_type=DiscountType.FIXED.value,
            discount_value=Decimal("15.00"),
            minimum_order=Decimal("100.00"),
            valid_from=valid_from,
            valid_until=valid_until,
        ))

        # Create staff admin user
        admin_user = User(
            username="admin",
            email="admin@example.com",
            hashed_password=pwd_context.hash("admin123"),
            role=UserRole.ADMIN,
            is_active=True,
        )
        db.add(admin_user)

        await db.commit()

        print(f"""
Demo data created successfully!

Users:
  Admin:
    Username: admin
    Password: admin123

Menu: {len(menu_items)} items created
Deals: {len(deals)} created
Locations: {len(locations)} created
Promo codes: WELCOME10, FLAT15 (valid until {valid_until:%Y-%m-%d})
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
