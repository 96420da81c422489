from decimal import Decimal
from pathlib import Path
import os
import sys

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

import barbershop.models  # noqa: E402,F401
from barbershop.core.config import Settings  # noqa: E402
from barbershop.core.database import Base  # noqa: E402
from barbershop.core.security import create_access_token  # noqa: E402
from barbershop.modules.admins.schemas import AdminCreate  # noqa: E402
from barbershop.modules.admins.service import AdminService  # noqa: E402
from barbershop.modules.catalog.models import Service  # noqa: E402
from barbershop.modules.products.models import Product  # noqa: E402
from barbershop.modules.staff.models import Staff  # noqa: E402
from main import create_app  # noqa: E402

ADMIN_EMAIL = "admin@barberia.com"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        JWT_SECRET="test-secret",
        DEFAULT_TIMEZONE="America/Argentina/Buenos_Aires",
    )


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings)
    async with app.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def db_session(app):
    async with app.state.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def admin(db_session):
    payload = AdminCreate(name="Admin", email=ADMIN_EMAIL, password=ADMIN_PASSWORD)
    return await AdminService(db_session).create(payload)


@pytest_asyncio.fixture
async def admin_client(app, admin, settings):
    token = create_access_token(str(admin.id), settings)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={settings.access_cookie_name: token},
    ) as client:
        yield client


@pytest_asyncio.fixture
async def staff(db_session) -> Staff:
    member = Staff(name="Carlos")
    db_session.add(member)
    await db_session.commit()
    await db_session.refresh(member)
    return member


@pytest_asyncio.fixture
async def haircut(db_session) -> Service:
    service = Service(name="Corte clásico", price=Decimal("50.00"), duration_minutes=30)
    db_session.add(service)
    await db_session.commit()
    await db_session.refresh(service)
    return service


@pytest_asyncio.fixture
async def product(db_session) -> Product:
    item = Product(name="Pomada", price=Decimal("12.50"), stock=3)
    db_session.add(item)
    await db_session.commit()
    await db_session.refresh(item)
    return item
