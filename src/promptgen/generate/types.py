# Typed structures shared across the generate package.
# Plain dataclasses for in-process values, pydantic models for the wire format.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


@dataclass(frozen=True)
class Modes:
    """Independent instruction toggles for a single invocation."""
    comments: bool = False
    documentation: bool = False
    explanations: bool = False


@dataclass(frozen=True)
class SamplingParams:
    """Sampling parameters fixed at client construction."""
    temperature: float
    top_p: float
    max_output_tokens: int
    top_k: int


@dataclass
class GenerationResult:
    """Outcome of one run, before persistence / output."""
    text: str
    raw_text: str
    prompt: str
    content: str
    actor: str
    modes: Modes


# -------------------------
# Wire models
# -------------------------
# The API may send null or omit any of these; treat that as empty.

class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, v: Any) -> Any:
        return "" if v is None else v


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: List[Part] = Field(default_factory=list)

    @field_validator("parts", mode="before")
    @classmethod
    def _null_parts(cls, v: Any) -> Any:
        return [] if v is None else v


class GenerationConfig(BaseModel):
    stopSequences: List[str] = Field(default_factory=list)
    temperature: float
    maxOutputTokens: int
    topP: float
    topK: int


class GenerationRequest(BaseModel):
    contents: List[Content]
    generationConfig: GenerationConfig


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Content = Field(default_factory=Content)

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, v: Any) -> Any:
        return {} if v is None else v


class GenerationResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidates: List[Candidate] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, v: Any) -> Any:
        # a bare JSON null decodes as an empty response
        return {} if v is None else v

    @field_validator("candidates", mode="before")
    @classmethod
    def _null_candidates(cls, v: Any) -> Any:
        return [] if v is None else v

    def first_text(self) -> Optional[str]:
        """Text of the first part of the first candidate, if any."""
        if not self.candidates or not self.candidates[0].content.parts:
            return None
        return self.candidates[0].content.parts[0].text
