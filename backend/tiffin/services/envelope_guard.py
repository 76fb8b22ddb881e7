"""Envelope Guard — turns whatever a service method does into exactly one Envelope.

Invariants:
    - A returned Envelope passes through untouched
    - TiffinError with a client status → error envelope, logged at WARNING
    - Any other exception (including 500-level TiffinError) → serverError envelope,
      logged at ERROR with traceback; stack exposed only if the service allows it
    - Nothing raised inside a guarded method reaches the router
    - Caught TiffinErrors have their context stamped with resource and operation
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from tiffin.core.envelope import Envelope
from tiffin.core.errors import TiffinError

logger = logging.getLogger(__name__)

ServiceMethod = Callable[..., Awaitable[Envelope]]


def enveloped(resource: str, operation: str) -> Callable[[ServiceMethod], ServiceMethod]:
    """Decorate an async service method; the instance must define expose_stack."""

    def decorator(method: ServiceMethod) -> ServiceMethod:
        @functools.wraps(method)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Envelope:
            extra = {"resource": resource, "operation": operation}
            try:
                return await method(self, *args, **kwargs)
            except TiffinError as exc:
                exc.context.resource = exc.context.resource or resource
                exc.context.operation = exc.context.operation or operation
                stamped = {
                    "resource": exc.context.resource,
                    "operation": exc.context.operation,
                    "error_code": exc.code,
                }
                if exc.is_client_error:
                    logger.warning(
                        f"{operation} rejected: {exc.message}",
                        extra=stamped,
                    )
                    return Envelope.error(exc)
                logger.error(
                    f"{operation} failed: {exc.message}",
                    extra=stamped,
                    exc_info=True,
                )
                return Envelope.server_error(exc, self.expose_stack)
            except Exception as exc:
                logger.error(
                    f"{operation} failed unexpectedly: {exc}",
                    extra={**extra, "error_code": "INTERNAL_ERROR"},
                    exc_info=True,
                )
                return Envelope.server_error(exc, self.expose_stack)

        return wrapper

    return decorator
