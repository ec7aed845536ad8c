# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import CodeGenerator
from .prompts import PromptComposer, as_actor, attach_content, compose
from .cleanup import clean_result_text, remove_first_line
from .types import Modes, SamplingParams, GenerationResult, GenerationRequest, GenerationResponse
from .clients.gemini_client import GeminiClient
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "CodeGenerator",
    "PromptComposer",
    "as_actor",
    "attach_content",
    "compose",
    "clean_result_text",
    "remove_first_line",
    "Modes",
    "SamplingParams",
    "GenerationResult",
    "GenerationRequest",
    "GenerationResponse",
    "GeminiClient",
    "EchoDevClient",
]
