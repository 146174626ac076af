"""
Server configuration.

Values come from the environment, optionally seeded from a ``.env`` file:

  MCP_SERVER_NAME    server name reported on initialize
  MCP_TRANSPORT      "stdio" (default) or "streamable-http"
  MCP_HOST/MCP_PORT  bind address for streamable-http
  LOG_LEVEL          logging level (default INFO)
  WEATHER_PROVIDER   "simulated" (default) or "open-meteo"
  WEATHER_TIMEOUT    HTTP timeout in seconds for open-meteo
  ENABLE_FILE_TOOLS  register read_file/write_file/list_directory
  FILES_ROOT         directory the file tools are confined to
"""

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

TRANSPORTS = ("stdio", "streamable-http")
WEATHER_PROVIDERS = ("simulated", "open-meteo")

SERVER_VERSION = "1.0.0"


@dataclass(frozen=True)
class Settings:
    server_name: str = "mcp-demo-server"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    weather_provider: str = "simulated"
    weather_timeout: float = 10.0
    enable_file_tools: bool = False
    files_root: str = "."


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (the process environment by default).

    Raises:
        ValueError: unknown transport or weather provider, or a malformed number
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    transport = environ.get("MCP_TRANSPORT", "stdio")
    if transport not in TRANSPORTS:
        raise ValueError(f"Unsupported transport '{transport}', expected one of {TRANSPORTS}")

    weather_provider = environ.get("WEATHER_PROVIDER", "simulated")
    if weather_provider not in WEATHER_PROVIDERS:
        raise ValueError(
            f"Unsupported weather provider '{weather_provider}', "
            f"expected one of {WEATHER_PROVIDERS}"
        )

    return Settings(
        server_name=environ.get("MCP_SERVER_NAME", "mcp-demo-server"),
        transport=transport,
        host=environ.get("MCP_HOST", "127.0.0.1"),
        port=int(environ.get("MCP_PORT", "8000")),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        weather_provider=weather_provider,
        weather_timeout=float(environ.get("WEATHER_TIMEOUT", "10")),
        enable_file_tools=_flag(environ.get("ENABLE_FILE_TOOLS", "false")),
        files_root=environ.get("FILES_ROOT", "."),
    )
