"""
Entrypoint: settings, logging, tool registry and MCP server are wired here and nowhere else.
Logs go to stderr; with the stdio transport stdout carries the MCP messages.
"""
import logging
import sys

from app.config import Settings, get_settings
from app.server import build_server
from tools.registry import build_registry

log = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_server(settings: Settings | None = None):
    """Composition root: registry built once, injected into the transport adapter."""
    settings = settings or get_settings()
    registry = build_registry(settings)
    return build_server(registry, settings)


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    server = create_server(settings)
    log.info("Starting %s (transport=%s)", settings.server_name, settings.mcp_transport)
    server.run(transport=settings.mcp_transport)


if __name__ == "__main__":
    main()
