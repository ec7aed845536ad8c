from __future__ import annotations


class PromptgenError(RuntimeError):
    """Base class for every error the tool reports to the user."""


class ConfigError(PromptgenError):
    """Raised when required configuration is missing or invalid."""


class StorageError(PromptgenError):
    """Raised when the prompt database cannot be opened or written."""


class GenerationError(PromptgenError):
    """Raised when a generation request cannot produce text."""


class TransportError(GenerationError):
    """Raised when the HTTP exchange itself fails (connection, timeout)."""


class SerializationError(GenerationError):
    """Raised when the request body cannot be encoded."""


class DecodeError(GenerationError):
    """Raised when the response body is not a valid generation response."""

    def __init__(self, message: str, *, raw: str = "") -> None:
        preview = raw.strip().replace("\n", " ")
        if len(preview) > 240:
            preview = preview[:240].rstrip() + "..."
        super().__init__(f"{message}. Preview: {preview}" if preview else message)
        self.raw = raw


class EmptyResponseError(GenerationError):
    """Raised when the response is well formed but carries no text."""

    def __init__(self, message: str = "no valid text found in response") -> None:
        super().__init__(message)
