"""
Tool registry: read-only mapping of tool name -> ToolDefinition, built once by the
composition root and handed to the transport. Holds the single getWeather entry.
"""
from types import MappingProxyType
from typing import Annotated, Any, Mapping, Optional

from pydantic import Field

from app.config import Settings
from tools.base import ToolDefinition, WeatherInput, text_envelope
from tools.weather_api import TOOL_DESCRIPTION, TOOL_NAME, get_weather


def _weather_definition(settings: Settings) -> ToolDefinition:
    # Absent, empty or non-string values must reach the input guard and get its fixed message,
    # not a validation error that repeats the input.
    async def handler(
        city: Annotated[
            Any,
            Field(description="The city to get the weather for", json_schema_extra={"type": "string"}),
        ] = None,
    ) -> str:
        return await get_weather(city, settings=settings)

    return ToolDefinition(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        input_schema=WeatherInput.model_json_schema(),
        handler=handler,
    )


def build_registry(settings: Settings) -> Mapping[str, ToolDefinition]:
    """Build the immutable registry for this process."""
    definitions = [_weather_definition(settings)]
    return MappingProxyType({d.name: d for d in definitions})


async def invoke_tool(
    registry: Mapping[str, ToolDefinition],
    name: str,
    arguments: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Call a registered tool and wrap its text in the response envelope. Unknown names raise KeyError."""
    try:
        definition = registry[name]
    except KeyError as exc:
        msg = f"Tool '{name}' is not registered."
        raise KeyError(msg) from exc
    text = await definition.handler(**(arguments or {}))
    return text_envelope(text)
