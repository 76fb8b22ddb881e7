"""Customer Routes — staff-facing customer management and access-key regeneration.

Invariants:
    - Raw path/query/body values go straight to CustomerService; it validates them
    - Registration answers 201; everything else that succeeds answers 200
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from tiffin.api.dependencies import get_customer_service
from tiffin.api.envelope_response import envelope_response
from tiffin.api.query_params import compact, lenient_int
from tiffin.services.customers import CustomerService

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.get("")
async def list_customers(
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_type: str | None = Query(None, alias="sortType"),
    active: str | None = None,
    service: CustomerService = Depends(get_customer_service),
):
    envelope = await service.list_customers(compact(
        page=lenient_int(page), limit=lenient_int(limit), search=search,
        sortBy=sort_by, sortType=sort_type, active=active,
    ))
    return envelope_response(envelope)


@router.post("")
async def register_customer(
    body: Any = Body(None),
    service: CustomerService = Depends(get_customer_service),
):
    envelope = await service.register_customer(body)
    return envelope_response(envelope, status.HTTP_201_CREATED)


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str, service: CustomerService = Depends(get_customer_service),
):
    return envelope_response(await service.get_customer(customer_id))


@router.patch("/{customer_id}")
async def update_customer(
    customer_id: str,
    body: Any = Body(None),
    service: CustomerService = Depends(get_customer_service),
):
    return envelope_response(await service.update_customer(customer_id, body))


@router.delete("/{customer_id}")
async def delete_customer(
    customer_id: str, service: CustomerService = Depends(get_customer_service),
):
    return envelope_response(await service.delete_customer(customer_id))


@router.post("/{customer_id}/access-key")
async def regenerate_access_key(
    customer_id: str, service: CustomerService = Depends(get_customer_service),
):
    return envelope_response(await service.regenerate_access_key(customer_id))
