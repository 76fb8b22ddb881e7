"""Customer Access Route — the self-service view, authorised only by the access key in the path."""

from fastapi import APIRouter, Depends, Query

from tiffin.api.dependencies import get_customer_access_service
from tiffin.api.envelope_response import envelope_response
from tiffin.api.query_params import compact, lenient_int
from tiffin.services.customer_access import CustomerAccessService

router = APIRouter(prefix="/api/v1/customer-access", tags=["customer-access"])


@router.get("/{key}")
async def view_customer(
    key: str,
    o_page: str | None = Query(None, alias="oPage"),
    p_page: str | None = Query(None, alias="pPage"),
    limit: str | None = None,
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_type: str | None = Query(None, alias="sortType"),
    from_date: str | None = Query(None, alias="fromDate"),
    to_date: str | None = Query(None, alias="toDate"),
    service: CustomerAccessService = Depends(get_customer_access_service),
):
    envelope = await service.view_customer(key, compact(
        oPage=lenient_int(o_page), pPage=lenient_int(p_page), limit=lenient_int(limit),
        sortBy=sort_by, sortType=sort_type, fromDate=from_date, toDate=to_date,
    ))
    return envelope_response(envelope)
