"""
MCP Demo Server
Protocol transport: stdio (default) or Streamable HTTP

A demonstration server exercising all three MCP server features against an
in-memory note store:
  - Tools:     calculate, create_note, list_notes, get_weather
               (+ read_file, write_file, list_directory when enabled)
  - Resources: demo://info, demo://capabilities, note://{id}
  - Prompts:   helpful_assistant, code_reviewer, summarize_notes

Run with:  uv run mcp-demo-server
"""

import logging
import sys
from typing import Annotated, Any

from mcp import types
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from demo_server import prompts as templates
from demo_server.calculator import OPERATIONS, describe
from demo_server.config import Settings, load_settings
from demo_server.errors import UnknownPromptError, UnknownResourceError, UnknownToolError
from demo_server.files import FileWorkspace
from demo_server.notes import NoteStore
from demo_server.resources import (
    CAPABILITIES_URI,
    INFO_URI,
    NOTE_SCHEME,
    SERVER_INFO,
    capabilities,
    note_uri,
    read_note,
)
from demo_server.weather import OpenMeteoWeather, SimulatedWeather, WeatherProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Server class: FastMCP plus note-backed resources and strict name checks
# ---------------------------------------------------------------------------

class DemoServer(FastMCP):
    """FastMCP server that owns a NoteStore and a weather provider.

    The tool, resource and prompt registries double as the dispatch tables:
    a name that is not registered is rejected before it reaches the SDK.
    """

    def __init__(self, config: Settings, store: NoteStore, weather: WeatherProvider) -> None:
        super().__init__(
            config.server_name,
            host=config.host,
            port=config.port,
            streamable_http_path="/mcp",
            log_level=config.log_level,
        )
        self.config = config
        self.store = store
        self.weather = weather

    async def list_resources(self) -> list[types.Resource]:
        resources = list(await super().list_resources())
        for note in self.store.all():
            resources.append(
                types.Resource(
                    uri=note_uri(note),
                    name=f"Note: {note.title}",
                    description=f"Note created on {note.created}",
                    mimeType="text/plain",
                )
            )
        return resources

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        if name not in {tool.name for tool in await self.list_tools()}:
            raise UnknownToolError(f"Unknown tool: {name}")
        return await super().call_tool(name, arguments)

    async def read_resource(self, uri: Any) -> Any:
        uri_str = str(uri)
        if uri_str.startswith(NOTE_SCHEME):
            read_note(self.store, uri_str.removeprefix(NOTE_SCHEME))
        else:
            static_uris = {str(resource.uri) for resource in await super().list_resources()}
            if uri_str not in static_uris:
                raise UnknownResourceError(f"Unknown resource: {uri_str}")
        return await super().read_resource(uri)

    async def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        if name not in {prompt.name for prompt in await self.list_prompts()}:
            raise UnknownPromptError(f"Unknown prompt: {name}")
        return await super().get_prompt(name, arguments)


# ---------------------------------------------------------------------------
# Tools — model-controlled functions
# ---------------------------------------------------------------------------

def _register_tools(server: DemoServer) -> None:
    store = server.store

    @server.tool()
    def calculate(
        operation: Annotated[
            str,
            Field(
                description="The arithmetic operation to perform",
                json_schema_extra={"enum": list(OPERATIONS)},
            ),
        ],
        a: Annotated[float, Field(description="First number")],
        b: Annotated[float, Field(description="Second number")],
    ) -> str:
        """Perform basic arithmetic calculations (add, subtract, multiply, divide)"""
        return describe(operation, a, b)

    @server.tool()
    def create_note(
        title: Annotated[str, Field(description="The title of the note")],
        content: Annotated[str, Field(description="The content of the note")],
    ) -> str:
        """Create a new note with a title and content"""
        note = store.create(title, content)
        return f"Note created successfully!\nID: {note.id}\nTitle: {note.title}"

    @server.tool()
    def list_notes() -> str:
        """List all notes with their IDs and titles"""
        notes = store.all()
        if not notes:
            return "No notes found. Create one using the create_note tool!"
        lines = "\n".join(f"ID {note.id}: {note.title}" for note in notes)
        return f"Available notes ({len(notes)}):\n{lines}"

    @server.tool()
    async def get_weather(
        city: Annotated[str, Field(description="The city name")],
    ) -> str:
        """Get weather information for a city"""
        weather = await server.weather.current(city)
        return weather.format()


def _register_file_tools(server: DemoServer, workspace: FileWorkspace) -> None:

    @server.tool()
    def read_file(
        file_path: Annotated[str, Field(description="The path to the file to read")],
    ) -> str:
        """Read the contents of a text file"""
        return f"File contents of {file_path}:\n\n{workspace.read(file_path)}"

    @server.tool()
    def write_file(
        file_path: Annotated[str, Field(description="The path to the file to write")],
        content: Annotated[str, Field(description="The content to write to the file")],
    ) -> str:
        """Write content to a text file (creates or overwrites)"""
        workspace.write(file_path, content)
        return f"File written successfully: {file_path}"

    @server.tool()
    def list_directory(
        directory_path: Annotated[
            str,
            Field(description="The directory path to list (defaults to current directory)"),
        ] = ".",
    ) -> str:
        """List files and directories in a folder"""
        entries = "\n".join(workspace.list(directory_path))
        return f"Contents of {directory_path}:\n\n{entries}"


# ---------------------------------------------------------------------------
# Resources — application-controlled data
# ---------------------------------------------------------------------------

def _register_resources(server: DemoServer) -> None:
    store = server.store
    transport = server.config.transport

    @server.resource(INFO_URI, name="Server Information", mime_type="text/plain")
    def server_info() -> str:
        """Information about this MCP demo server"""
        return SERVER_INFO

    @server.resource(CAPABILITIES_URI, name="MCP Capabilities", mime_type="application/json")
    def server_capabilities() -> str:
        """Overview of MCP protocol capabilities"""
        return capabilities(transport)

    @server.resource(NOTE_SCHEME + "{note_id}", name="note", mime_type="text/plain")
    def note(note_id: str) -> str:
        """Read a stored note by id"""
        return read_note(store, note_id)


# ---------------------------------------------------------------------------
# Prompts — user-controlled templates
# ---------------------------------------------------------------------------

def _register_prompts(server: DemoServer) -> None:
    store = server.store

    @server.prompt()
    def helpful_assistant(
        task: Annotated[str, Field(description="The task to help with")] = "general assistance",
    ) -> str:
        """A helpful and friendly assistant persona"""
        return templates.helpful_assistant(task)

    @server.prompt()
    def code_reviewer(
        language: Annotated[str, Field(description="Programming language")] = "unknown",
        code: Annotated[str, Field(description="Code to review")] = "",
    ) -> str:
        """Review code and provide constructive feedback"""
        return templates.code_reviewer(language, code)

    @server.prompt()
    def summarize_notes() -> str:
        """Summarize all notes in the system"""
        return templates.summarize_notes(store)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def build_weather_provider(config: Settings) -> WeatherProvider:
    if config.weather_provider == "open-meteo":
        return OpenMeteoWeather(timeout=config.weather_timeout)
    return SimulatedWeather()


def create_server(
    config: Settings | None = None,
    store: NoteStore | None = None,
    weather: WeatherProvider | None = None,
) -> DemoServer:
    """Build a fully registered DemoServer.

    Args:
        config: Settings to use; defaults to Settings() with no env lookup
        store: Note store to serve; a fresh empty one by default
        weather: Weather provider; chosen from config by default
    """
    config = config or Settings()
    server = DemoServer(
        config,
        store=store if store is not None else NoteStore(),
        weather=weather or build_weather_provider(config),
    )
    _register_tools(server)
    if config.enable_file_tools:
        _register_file_tools(server, FileWorkspace(config.files_root))
    _register_resources(server)
    _register_prompts(server)
    return server


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    try:
        config = load_settings()
        server = create_server(config)
        print(f"MCP Demo Server running on {config.transport}", file=sys.stderr)
        server.run(transport=config.transport)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
