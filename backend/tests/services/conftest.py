"""Service test fixtures — in-memory SQLite database, repositories and services.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Services are wired exactly as the API wires them, one session for all repositories
    - A controllable clock lets tests move past access-key expiry

Design Decisions:
    - SQLite in-memory: fast, no external dependency; nothing here relies on
      PostgreSQL-specific behaviour
    - StaticPool: every connection sees the same in-memory database
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tiffin.core.pagination import ListDefaults
from tiffin.db.base import Base
from tiffin.infrastructure.customer_repository import SqlCustomerRepository
from tiffin.infrastructure.order_repository import SqlOrderRepository
from tiffin.infrastructure.payment_repository import SqlPaymentRepository
from tiffin.services.customer_access import CustomerAccessService
from tiffin.services.customers import CustomerService
from tiffin.services.orders import OrderService
from tiffin.services.payments import PaymentService

from tests.services.factories import FakeClock, customer_body


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock(datetime.now(timezone.utc))


@pytest.fixture
def customer_repo(test_db):
    return SqlCustomerRepository(test_db)


@pytest.fixture
def order_repo(test_db):
    return SqlOrderRepository(test_db)


@pytest.fixture
def payment_repo(test_db):
    return SqlPaymentRepository(test_db)


@pytest.fixture
def customer_service(customer_repo, clock):
    return CustomerService(customer_repo, ListDefaults(), clock=clock)


@pytest.fixture
def order_service(order_repo, customer_repo):
    return OrderService(order_repo, customer_repo, ListDefaults())


@pytest.fixture
def payment_service(payment_repo, customer_repo):
    return PaymentService(payment_repo, customer_repo, ListDefaults())


@pytest.fixture
def access_service(customer_repo, order_repo, payment_repo, clock):
    return CustomerAccessService(
        customer_repo, order_repo, payment_repo, ListDefaults(), clock=clock,
    )


@pytest.fixture
def register_customer(customer_service):
    """Register a customer through the service; returns the success body."""

    async def _register(**overrides) -> dict:
        envelope = await customer_service.register_customer(customer_body(**overrides))
        assert envelope.is_success, envelope.body
        return envelope.body

    return _register
