"""Query Parameter Helpers — lenient parsing of raw query strings.

Invariants:
    - A missing, zero or non-numeric page/limit becomes None (service default applies)
    - Blank strings are treated as absent
"""

from typing import Any


def lenient_int(raw: str | None) -> int | None:
    """Leading-integer parse; anything unusable means "use the default"."""
    if raw is None:
        return None
    text = raw.strip()
    sign = ""
    if text[:1] in ("-", "+"):
        sign, text = text[0], text[1:]
    digits = ""
    for ch in text:
        if ch not in "0123456789":
            break
        digits += ch
    if not digits:
        return None
    value = int(sign + digits)
    return value or None


def compact(**values: Any) -> dict[str, Any]:
    """Drop parameters the client did not supply."""
    return {key: value for key, value in values.items() if value not in (None, "")}
