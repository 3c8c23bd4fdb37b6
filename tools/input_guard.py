"""
Input guard for the weather tool: validates the city argument and strips characters
with special meaning in markup or shell-like contexts before any network call.
Rejection messages are fixed strings and never echo the input.
"""
import re
from dataclasses import dataclass
from typing import Any, Optional

MAX_CITY_LENGTH = 100
BLOCKED_CHARS = "<>'\";&()"

EMPTY_CITY_MESSAGE = "city name cannot be empty"
INVALID_CITY_MESSAGE = "invalid city name provided"

_BLOCKED_RE = re.compile(r"[<>'\";&()]")


@dataclass(frozen=True)
class GuardResult:
    """Either a sanitized city (city set) or a rejection (error set)."""
    city: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def sanitize_city(text: str) -> str:
    """Remove blocked characters, trim, cap at 100 chars."""
    cleaned = _BLOCKED_RE.sub("", text).strip()
    # Re-trim: a cut landing on a space would otherwise leave trailing whitespace.
    return cleaned[:MAX_CITY_LENGTH].strip()


def validate_city(raw: Any) -> GuardResult:
    """
    Check presence first, then sanitize. Pure function: no I/O, no logging of the value.
    """
    if not isinstance(raw, str) or not raw.strip():
        return GuardResult(error=EMPTY_CITY_MESSAGE)
    city = sanitize_city(raw)
    if not city:
        return GuardResult(error=INVALID_CITY_MESSAGE)
    return GuardResult(city=city)
