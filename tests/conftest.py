"""Test configuration and fixtures"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from restaurant_api.main import app
from restaurant_api.database import Base, get_db
from restaurant_api.models.menu import MenuItem, Deal, SpecialOffer
from restaurant_api.models.promo import PromoCode, DiscountType
from restaurant_api.models.user import User, UserRole
from restaurant_api.notifications.notifier import OrderNotifier, get_notifier
from restaurant_api.security import get_password_hash, create_access_token


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class RecordingNotifier(OrderNotifier):
    """Keeps every order summary it is handed"""

    def __init__(self):
        self.placed = []

    async def order_placed(self, summary):
        self.placed.append(summary)


class FailingNotifier(OrderNotifier):
    """Simulates an unreachable mail queue"""

    async def order_placed(self, summary):
        raise ConnectionError("broker unavailable")


class UnavailableSession:
    """Stands in for a session whose database connection has dropped"""

    def __init__(self):
        self.rollbacks = 0

    def _fail(self):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("could not connect to server: Connection refused"))

    def add(self, instance):
        pass

    async def execute(self, *args, **kwargs):
        self._fail()

    async def flush(self, *args, **kwargs):
        self._fail()

    async def commit(self):
        self._fail()

    async def rollback(self):
        self.rollbacks += 1


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_menu_items(test_db):
    """Create test menu items"""
    items = [
        MenuItem(
            item_name="Zinger Sandwich",
            description="Extra crispy and spicy chicken fillet with mayo and lettuce",
            price=Decimal("35.00"),
            category="Sandwiches",
            calories=450,
        ),
        MenuItem(
            item_name="Hot Wings",
            description="Spicy chicken wings served with ranch sauce",
            price=Decimal("30.00"),
            category="Snacks",
            calories=350,
        ),
        MenuItem(
            item_name="Potato Wedges",
            description="Crispy potato wedges with a hint of spices",
            price=Decimal("20.00"),
            category="Sides",
            calories=250,
        ),
        MenuItem(
            item_name="Rizo Rice",
            description="Fluffy rice with a hint of spices, perfect as a side dish",
            price=Decimal("10.00"),
            category="Sides",
            calories=200,
        ),
    ]

    for item in items:
        test_db.add(item)

    await test_db.commit()
    return items


@pytest.fixture
async def test_deals(test_db):
    """Create deals, one of them inactive"""
    deals = [
        Deal(deal_name="Dinner Box", price=Decimal("125.00"), priority=2, active=True),
        Deal(deal_name="Family Feast", price=Decimal("599.00"), priority=3, active=True),
        Deal(deal_name="Zinger Combo", price=Decimal("150.00"), priority=1, active=True),
        Deal(deal_name="Retired Bucket", price=Decimal("99.00"), priority=9, active=False),
    ]
    for deal in deals:
        test_db.add(deal)

    await test_db.commit()
    return deals


@pytest.fixture
async def test_offers(test_db):
    """Create one running, one finished and one upcoming offer"""
    now = datetime.utcnow()
    offers = [
        SpecialOffer(
            offer_name="Ramadan Special",
            discount_type="percentage",
            discount_value=Decimal("20.00"),
            start_date=now - timedelta(days=1),
            end_date=now + timedelta(days=1),
        ),
        SpecialOffer(
            offer_name="Last Month",
            start_date=now - timedelta(days=60),
            end_date=now - timedelta(days=30),
        ),
        SpecialOffer(
            offer_name="Next Month",
            start_date=now + timedelta(days=30),
            end_date=now + timedelta(days=60),
        ),
    ]
    for offer in offers:
        test_db.add(offer)

    await test_db.commit()
    return offers


@pytest.fixture
async def test_promo_codes(test_db):
    """Create promo codes covering each eligibility outcome"""
    now = datetime.utcnow()
    codes = [
        PromoCode(
            code="WELCOME10",
            discount_type=DiscountType.PERCENTAGE.value,
            discount_value=Decimal("10.00"),
            minimum_order=Decimal("50.00"),
            valid_from=now - timedelta(days=30),
            valid_until=now + timedelta(days=30),
        ),
        PromoCode(
            code="FLAT15",
            discount_type=DiscountType.FIXED.value,
            discount_value=Decimal("15.00"),
            minimum_order=Decimal("0.00"),
            valid_from=now - timedelta(days=30),
            valid_until=now + timedelta(days=30),
        ),
        PromoCode(
            code="EXPIRED",
            discount_type=DiscountType.PERCENTAGE.value,
            discount_value=Decimal("50.00"),
            minimum_order=Decimal("0.00"),
            valid_from=now - timedelta(days=60),
            valid_until=now - timedelta(days=1),
        ),
        PromoCode(
            code="PAUSED",
            discount_type=DiscountType.FIXED.value,
            discount_value=Decimal("5.00"),
            minimum_order=Decimal("0.00"),
            valid_from=now - timedelta(days=30),
            valid_until=now + timedelta(days=30),
            active=False,
        ),
    ]
    for code in codes:
        test_db.add(code)

    await test_db.commit()
    return codes


@pytest.fixture
async def test_user(test_db):
    """Create a test customer"""
    user = User(
        username="testcustomer",
        email="test@example.com",
        hashed_password=get_password_hash("testpass123"),
        phone="01000000000",
        address="12 Tahrir Square, Cairo",
        role=UserRole.CUSTOMER,
        is_active=True,
    )
    test_db.add(user)
    await test_db.commit()

    return user


@pytest.fixture
async def test_admin_user(test_db):
    """Create a staff admin user"""
    user = User(
        username="admin",
        email="admin@example.com",
        hashed_password=get_password_hash("adminpass123"),
        role=UserRole.ADMIN,
        is_active=True,
    )
    test_db.add(user)
    await test_db.commit()

    return user


@pytest.fixture
def notifier():
    """Notifier that records confirmations instead of queueing them"""
    return RecordingNotifier()


@pytest.fixture
async def client(test_db, notifier):
    """Create test client with overridden database and notifier"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def authenticated_client(client, test_user):
    """Create authenticated test client"""
    token = create_access_token(test_user)
    client.headers["Authorization"] = f"Bearer {token}"

    return client


@pytest.fixture
async def admin_client(client, test_admin_user):
    """Create admin authenticated test client"""
    token = create_access_token(test_admin_user)
    client.headers["Authorization"] = f"Bearer {token}"

    return client


@pytest.fixture
def unavailable_db():
    return UnavailableSession()


@pytest.fixture
async def offline_client(unavailable_db, notifier):
    """Test client whose database is unreachable"""
    async def override_get_db():
        yield unavailable_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def order_payload(items, **overrides):
    """Checkout body for the given (menu item, quantity) pairs"""
    lines = [
        {
            "item_id": item_id,
            "name": name,
            "quantity": quantity,
            "price": str(price),
        }
        for item_id, name, price, quantity in items
    ]
    total = sum(Decimal(line["price"]) * line["quantity"] for line in lines)
    payload = {
        "delivery_address": "45 Talaat Harb St., Downtown, Cairo",
        "phone": "01012345678",
        "email": "customer@example.com",
        "total_amount": str(total),
        "payment_method": "Cash on Delivery",
        "items": lines,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_order():
    """Builder for checkout bodies"""
    return order_payload
