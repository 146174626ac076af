"""
Errors raised by the demo server.

Every error is raised synchronously from the handler that detects it. The MCP
SDK turns the message into either a protocol error or an ``isError`` tool
result, so the text is what the caller sees.
"""


class DemoServerError(Exception):
    """Base class for all demo server errors."""


class UnknownToolError(DemoServerError):
    """No tool is registered under the requested name."""


class UnknownResourceError(DemoServerError):
    """No resource matches the requested URI."""


class UnknownPromptError(DemoServerError):
    """No prompt is registered under the requested name."""


class InvalidOperationError(DemoServerError):
    """Unsupported arithmetic operation, or division by zero."""


class NoteNotFoundError(DemoServerError):
    """The referenced note id does not exist."""


class WeatherServiceError(DemoServerError):
    """The live weather lookup failed."""


class FileOperationError(DemoServerError):
    """A file tool failed or was given an unsafe path."""
