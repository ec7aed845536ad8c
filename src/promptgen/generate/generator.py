# CodeGenerator wires the pieces of one run together:
#   task (+ attached content) -> model client -> cleaned text.
# Any client exposing generate_content(actor, prompt, modes) works
# (GeminiClient for real calls, EchoDevClient for offline runs).

from __future__ import annotations
import logging
from urllib.parse import urlsplit

from .cleanup import clean_result_text
from .prompts import attach_content
from .types import GenerationResult, Modes

logger = logging.getLogger("promptgen.generate")


class CodeGenerator:
    def __init__(self, model_client):
        self.model_client = model_client

    def _endpoint_host(self) -> str:
        url = getattr(self.model_client, "url", "")
        return urlsplit(url).netloc if url else getattr(self.model_client, "model", "?")

    def generate(self, actor: str, task: str, modes: Modes, content: str = "") -> GenerationResult:
        """Main entry point for generation. Errors from the client propagate unchanged."""
        prompt = attach_content(task, content)
        logger.debug(
            "requesting generation from %s (comments=%s documentation=%s explanations=%s, content=%d chars)",
            self._endpoint_host(), modes.comments, modes.documentation, modes.explanations, len(content),
        )
        raw_text = self.model_client.generate_content(actor, prompt, modes)
        logger.debug("received %d chars of generated text", len(raw_text))

        return GenerationResult(
            text=clean_result_text(raw_text),
            raw_text=raw_text,
            prompt=prompt,
            content=content,
            actor=actor,
            modes=modes,
        )
