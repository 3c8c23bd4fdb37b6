"""Shared types for tool inputs/outputs. Tool input models use pydantic for schema generation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Failure classes a lookup can end in. Only the text reaches the caller."""
    VALIDATION = "validation"
    UPSTREAM_TRANSPORT = "upstream_transport"
    UPSTREAM_STATUS = "upstream_status"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


class WeatherInput(BaseModel):
    """Input for the getWeather tool."""
    city: str = Field(min_length=1, description="The city to get the weather for")


@dataclass(frozen=True)
class LookupResult:
    """Tagged outcome of one weather lookup: ok with payload, or an error kind with its message."""
    ok: bool
    text: str
    kind: Optional[ErrorKind] = None
    data: Optional[dict[str, Any]] = None

    @classmethod
    def success(cls, text: str, data: dict[str, Any]) -> "LookupResult":
        return cls(ok=True, text=text, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, text: str) -> "LookupResult":
        return cls(ok=False, text=text, kind=kind)


ToolHandler = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class ToolDefinition:
    """Registry record: what a host needs to advertise and call one tool."""
    name: str
    description: str
    input_schema: dict[str, Any]
    handler: ToolHandler


def text_envelope(text: str) -> dict[str, Any]:
    """Wrap a tool response string in the {content: [{type: text, text}]} envelope."""
    return {"content": [{"type": "text", "text": text}]}
