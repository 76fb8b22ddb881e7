"""Order Routes — daily meal orders.

Invariants:
    - /count is declared before /{order_id} so it is never captured as an id
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from tiffin.api.dependencies import get_order_service
from tiffin.api.envelope_response import envelope_response
from tiffin.api.query_params import compact, lenient_int
from tiffin.services.orders import OrderService

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.get("")
async def list_orders(
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_type: str | None = Query(None, alias="sortType"),
    date: str | None = None,
    from_date: str | None = Query(None, alias="fromDate"),
    to_date: str | None = Query(None, alias="toDate"),
    customer: str | None = None,
    service: OrderService = Depends(get_order_service),
):
    envelope = await service.list_orders(compact(
        page=lenient_int(page), limit=lenient_int(limit), search=search,
        sortBy=sort_by, sortType=sort_type, date=date,
        fromDate=from_date, toDate=to_date, customer=customer,
    ))
    return envelope_response(envelope)


@router.get("/count")
async def count_orders(
    customer_id: str | None = Query(None, alias="customerId"),
    service: OrderService = Depends(get_order_service),
):
    return envelope_response(await service.count_orders(compact(customerId=customer_id)))


@router.post("")
async def register_order(
    body: Any = Body(None), service: OrderService = Depends(get_order_service),
):
    envelope = await service.register_order(body)
    return envelope_response(envelope, status.HTTP_201_CREATED)


@router.get("/{order_id}")
async def get_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    return envelope_response(await service.get_order(order_id))


@router.patch("/{order_id}")
async def update_order(
    order_id: str,
    body: Any = Body(None),
    service: OrderService = Depends(get_order_service),
):
    return envelope_response(await service.update_order(order_id, body))


@router.delete("/{order_id}")
async def delete_order(
    order_id: str, service: OrderService = Depends(get_order_service),
):
    return envelope_response(await service.delete_order(order_id))
