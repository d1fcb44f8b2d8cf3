"""
AI Client Models

Pydantic models for the Gemini generateContent wire format.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class Part(BaseModel):
    """One text part of a content block."""

    model_config = ConfigDict(extra="ignore")

    text: str


class Content(BaseModel):
    """Content block holding one or more parts."""

    model_config = ConfigDict(extra="ignore")

    parts: List[Part] = Field(min_length=1)


class GenerationConfig(BaseModel):
    """Sampling parameters, serialized with Gemini's camelCase names."""

    max_output_tokens: int = Field(serialization_alias="maxOutputTokens", gt=0)
    temperature: Optional[float] = None
    top_p: Optional[float] = Field(default=None, serialization_alias="topP")
    top_k: Optional[int] = Field(default=None, serialization_alias="topK")


class GenerateContentRequest(BaseModel):
    """Body of POST {endpoint}?key=..."""

    contents: List[Content]
    generation_config: GenerationConfig = Field(serialization_alias="generationConfig")

    @classmethod
    def from_prompt(cls, prompt: str, config: GenerationConfig) -> "GenerateContentRequest":
        return cls(contents=[Content(parts=[Part(text=prompt)])], generation_config=config)

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class Candidate(BaseModel):
    """One generated candidate."""

    model_config = ConfigDict(extra="ignore")

    content: Content


class GenerateContentResponse(BaseModel):
    """Success body. Only the fields read by the client are modelled."""

    model_config = ConfigDict(extra="ignore")

    candidates: List[Candidate] = Field(min_length=1)

    @property
    def first_text(self) -> str:
        return self.candidates[0].content.parts[0].text
