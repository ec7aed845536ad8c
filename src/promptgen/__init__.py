# promptgen: compose code-generation prompts and send them to the Gemini API.

from .errors import (
    PromptgenError,
    ConfigError,
    StorageError,
    GenerationError,
    TransportError,
    SerializationError,
    DecodeError,
    EmptyResponseError,
)
from .generate import CodeGenerator, PromptComposer, GeminiClient, EchoDevClient, Modes
from .storage import PromptRecord, PromptRepository

__version__ = "0.1.0"

__all__ = [
    "PromptgenError",
    "ConfigError",
    "StorageError",
    "GenerationError",
    "TransportError",
    "SerializationError",
    "DecodeError",
    "EmptyResponseError",
    "CodeGenerator",
    "PromptComposer",
    "GeminiClient",
    "EchoDevClient",
    "Modes",
    "PromptRecord",
    "PromptRepository",
]
