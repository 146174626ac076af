"""MCP demo server: tools, resources and prompts over an in-memory note store."""

from demo_server.config import SERVER_VERSION as __version__
from demo_server.server import DemoServer, create_server

__all__ = ["DemoServer", "create_server", "__version__"]
