from pathlib import Path
from typing import Optional, Union


class InvalidOperationError(ValueError):
    """Raised when the retry executor is handed no operation to run.

    Kept separate from anything the operation itself may raise so callers can
    tell a wiring mistake from a failed attempt.
    """


# Application exceptions

class SchemagenError(Exception):
    """Base exception for schema-to-code application failures.

    Attributes:
        message: Human-readable error description
        diagnostic: Technical diagnostic information for debugging
    """
    def __init__(self, message: str, diagnostic: Optional[str] = None):
        self.message = message
        self.diagnostic = diagnostic
        super().__init__(message)


class CodegenStateError(SchemagenError):
    """Raised when a session step is requested before its inputs exist."""


class SchemaLoadError(SchemagenError):
    """Raised when a JSON Schema document cannot be read or parsed.

    Attributes:
        path: Location of the schema file that failed to load
    """
    def __init__(
        self,
        path: Union[str, Path],
        diagnostic: Optional[str] = None,
    ):
        self.path = Path(path)
        message = f"Could not load JSON Schema from {self.path}"
        super().__init__(message=message, diagnostic=diagnostic)


class CodeGenerationError(SchemagenError):
    """Raised when the code generator rejects a schema."""
    def __init__(self, diagnostic: Optional[str] = None):
        super().__init__(message="Code generation failed", diagnostic=diagnostic)


class ClipboardError(SchemagenError):
    """Raised when generated code could not be copied after all retries."""
    def __init__(self, diagnostic: Optional[str] = None):
        super().__init__(message="Could not copy code to the clipboard", diagnostic=diagnostic)


class ClipboardUnavailableError(Exception):
    """A single clipboard write failed; usually another process holds the clipboard."""
