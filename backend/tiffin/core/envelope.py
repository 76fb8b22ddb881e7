"""Response Envelope — the three-shape result every service returns.

Invariants:
    - Exactly one shape per envelope: success, error or serverError
    - success bodies always carry "success": True and a "message"
    - serverError bodies carry the exception message; the stack trace is
      included only when the caller asks for it (development environment)
"""

import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tiffin.core.errors import TiffinError


class EnvelopeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    SERVER_ERROR = "serverError"


@dataclass(frozen=True)
class Envelope:
    """Discriminated service result."""
    kind: EnvelopeKind
    body: dict[str, Any]

    @classmethod
    def success(cls, message: str, **payload: Any) -> "Envelope":
        return cls(EnvelopeKind.SUCCESS, {"success": True, "message": message, **payload})

    @classmethod
    def error(cls, exc: TiffinError) -> "Envelope":
        return cls(EnvelopeKind.ERROR, exc.to_response())

    @classmethod
    def server_error(cls, exc: BaseException, expose_stack: bool) -> "Envelope":
        stack = (
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            if expose_stack else None
        )
        return cls(
            EnvelopeKind.SERVER_ERROR,
            {"success": False, "message": str(exc) or type(exc).__name__, "stack": stack},
        )

    @property
    def is_success(self) -> bool:
        return self.kind is EnvelopeKind.SUCCESS
