"""Static resource bodies and note rendering."""

import json

from demo_server.config import SERVER_VERSION
from demo_server.errors import NoteNotFoundError
from demo_server.notes import Note, NoteStore

INFO_URI = "demo://info"
CAPABILITIES_URI = "demo://capabilities"
NOTE_SCHEME = "note://"

SERVER_INFO = f"""MCP Demo Server v{SERVER_VERSION}

This server demonstrates the core capabilities of the Model Context Protocol:

🛠️  TOOLS: Interactive functions that can be called
   - calculate: Perform arithmetic operations
   - create_note: Create and store notes
   - list_notes: View all saved notes
   - get_weather: Get simulated weather data

📄 RESOURCES: Exposed data that can be read
   - Server information (this document)
   - Capabilities overview
   - Dynamic note resources

💬 PROMPTS: Pre-configured prompt templates
   - Helpful assistant persona
   - Code review assistant
   - Note summarizer

The MCP allows AI models to interact with external tools and data sources in a standardized way."""


def capabilities(transport: str = "stdio") -> str:
    manifest = {
        "protocol": "Model Context Protocol (MCP)",
        "version": SERVER_VERSION,
        "features": {
            "tools": "Execute functions with structured input/output",
            "resources": "Access and read external data sources",
            "prompts": "Use pre-configured prompt templates",
        },
        "transport": transport,
        "documentation": "https://modelcontextprotocol.io",
    }
    return json.dumps(manifest, indent=2)


def note_uri(note: Note) -> str:
    return f"{NOTE_SCHEME}{note.id}"


def render_note(note: Note) -> str:
    return f"Title: {note.title}\nCreated: {note.created}\n\n{note.content}"


def read_note(store: NoteStore, note_id: str) -> str:
    """Look up ``note_id`` (the part after ``note://``) and render it.

    Raises:
        NoteNotFoundError: the id is not an integer or no such note exists
    """
    try:
        key = int(note_id)
    except ValueError:
        raise NoteNotFoundError(f"Note not found: {note_id}") from None
    return render_note(store.get(key))
