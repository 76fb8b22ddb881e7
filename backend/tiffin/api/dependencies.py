"""Service Dependencies — FastAPI providers wiring repositories and settings into services.

Invariants:
    - One AsyncSession per request, shared by every repository a service uses
    - Settings reach services as plain values (defaults, TTLs, expose_stack)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tiffin.config import Settings, get_settings
from tiffin.infrastructure.customer_repository import SqlCustomerRepository
from tiffin.infrastructure.database import get_db
from tiffin.infrastructure.order_repository import SqlOrderRepository
from tiffin.infrastructure.payment_repository import SqlPaymentRepository
from tiffin.services.customer_access import CustomerAccessService
from tiffin.services.customers import CustomerService
from tiffin.services.orders import OrderService
from tiffin.services.payments import PaymentService


def get_customer_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CustomerService:
    return CustomerService(
        SqlCustomerRepository(db),
        settings.list_defaults,
        initial_key_ttl=settings.access_key_initial_ttl,
        key_ttl=settings.access_key_ttl,
        expose_stack=settings.expose_stack_traces,
    )


def get_order_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> OrderService:
    return OrderService(
        SqlOrderRepository(db),
        SqlCustomerRepository(db),
        settings.list_defaults,
        expose_stack=settings.expose_stack_traces,
    )


def get_payment_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> PaymentService:
    return PaymentService(
        SqlPaymentRepository(db),
        SqlCustomerRepository(db),
        settings.list_defaults,
        expose_stack=settings.expose_stack_traces,
    )


def get_customer_access_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CustomerAccessService:
    return CustomerAccessService(
        SqlCustomerRepository(db),
        SqlOrderRepository(db),
        SqlPaymentRepository(db),
        settings.list_defaults,
        expose_stack=settings.expose_stack_traces,
    )
