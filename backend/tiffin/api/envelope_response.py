"""Envelope Response — maps a service Envelope onto an HTTP response.

Invariants:
    - success → success_status (200, or 201 for creates)
    - error → 400 for every client-side failure, including not-found
    - serverError → 500
    - The response body is the envelope body, unchanged
"""

from fastapi import status
from fastapi.responses import JSONResponse

from tiffin.core.envelope import Envelope, EnvelopeKind

_STATUS_BY_KIND = {
    EnvelopeKind.ERROR: status.HTTP_400_BAD_REQUEST,
    EnvelopeKind.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope_response(
    envelope: Envelope, success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    status_code = _STATUS_BY_KIND.get(envelope.kind, success_status)
    return JSONResponse(status_code=status_code, content=envelope.body)
