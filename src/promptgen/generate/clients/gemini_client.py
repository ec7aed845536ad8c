# Client for the Gemini generateContent REST endpoint.
# One synchronous POST per call: no retries, no caching.

from __future__ import annotations
from typing import Optional

import requests
from pydantic import ValidationError

from ...errors import DecodeError, EmptyResponseError, SerializationError, TransportError
from ..cleanup import remove_first_line
from ..prompts import as_actor, compose
from ..types import (
    Content,
    GenerationConfig,
    GenerationRequest,
    GenerationResponse,
    Modes,
    Part,
    SamplingParams,
)


class GeminiClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        temperature: float,
        top_p: float,
        max_output_tokens: int,
        top_k: int,
        timeout: Optional[float] = None,
    ):
        # base_url is expected to end with the key query delimiter ("?key=")
        self.url = f"{base_url}{api_key}"
        self.params = SamplingParams(
            temperature=temperature,
            top_p=top_p,
            max_output_tokens=max_output_tokens,
            top_k=top_k,
        )
        self.timeout = timeout
        self.model = "gemini"

    def build_request(self, actor: str, prompt: str, modes: Modes) -> GenerationRequest:
        text = as_actor(actor, compose(prompt, modes))
        return GenerationRequest(
            contents=[Content(parts=[Part(text=text)])],
            generationConfig=GenerationConfig(
                stopSequences=[],
                temperature=self.params.temperature,
                maxOutputTokens=self.params.max_output_tokens,
                topP=self.params.top_p,
                topK=self.params.top_k,
            ),
        )

    def generate_content(self, actor: str, prompt: str, modes: Modes) -> str:
        """Send one request and return the first candidate's text minus its first line."""
        try:
            body = self.build_request(actor, prompt, modes).model_dump_json()
        except (ValueError, TypeError) as e:
            raise SerializationError(f"cannot encode request body: {e}") from e

        try:
            resp = requests.post(
                self.url,
                data=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            raw = resp.text
        except requests.RequestException as e:
            raise TransportError(f"request to generation API failed: {e}") from e

        try:
            data = GenerationResponse.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError("cannot decode generation response", raw=raw) from e

        text = data.first_text()
        if text is None:
            raise EmptyResponseError()
        return remove_first_line(text)
