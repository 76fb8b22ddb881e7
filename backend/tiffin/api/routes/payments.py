"""Payment Routes — customer payments (no update; delete and re-register instead)."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from tiffin.api.dependencies import get_payment_service
from tiffin.api.envelope_response import envelope_response
from tiffin.api.query_params import compact, lenient_int
from tiffin.services.payments import PaymentService

router = APIRouter(prefix="/api/v1/payments", tags=["payments"])


@router.get("")
async def list_payments(
    page: str | None = None,
    limit: str | None = None,
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_type: str | None = Query(None, alias="sortType"),
    from_date: str | None = Query(None, alias="fromDate"),
    to_date: str | None = Query(None, alias="toDate"),
    customer: str | None = None,
    service: PaymentService = Depends(get_payment_service),
):
    envelope = await service.list_payments(compact(
        page=lenient_int(page), limit=lenient_int(limit),
        sortBy=sort_by, sortType=sort_type,
        fromDate=from_date, toDate=to_date, customer=customer,
    ))
    return envelope_response(envelope)


@router.post("")
async def register_payment(
    body: Any = Body(None), service: PaymentService = Depends(get_payment_service),
):
    envelope = await service.register_payment(body)
    return envelope_response(envelope, status.HTTP_201_CREATED)


@router.get("/{payment_id}")
async def get_payment(
    payment_id: str, service: PaymentService = Depends(get_payment_service),
):
    return envelope_response(await service.get_payment(payment_id))


@router.delete("/{payment_id}")
async def delete_payment(
    payment_id: str, service: PaymentService = Depends(get_payment_service),
):
    return envelope_response(await service.delete_payment(payment_id))
