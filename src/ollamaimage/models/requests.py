"""Request models for ollamaimage."""

import os
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ollamaimage.interfaces import ProgressCallback

DEFAULT_HOST = "http://localhost:11434"
DEFAULT_MODEL = "x/flux2-klein:4b"

# Environment overrides for the built-in defaults (explicit values always win)
HOST_ENV_VAR = "OLLAMA_IMAGE_HOST"
MODEL_ENV_VAR = "OLLAMA_IMAGE_MODEL"


class _ServerTarget(BaseModel):
    """Fields shared by single and batch requests: where to send them and how."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        None,
        validate_default=True,
        description="Base URL of the inference server (defaults to OLLAMA_IMAGE_HOST or http://localhost:11434)",
    )
    model: str = Field(
        None,
        validate_default=True,
        description="Model identifier (defaults to OLLAMA_IMAGE_MODEL or x/flux2-klein:4b)",
    )
    options: Optional[dict[str, Any]] = Field(
        None,
        description="Model-specific tuning parameters (seed, width, height, steps, negative_prompt, ...), sent verbatim",
    )

    @field_validator("host", mode="before")
    @classmethod
    def resolve_host(cls, value: Any) -> Any:
        if value is None:
            return os.getenv(HOST_ENV_VAR) or DEFAULT_HOST
        return value

    @field_validator("model", mode="before")
    @classmethod
    def resolve_model(cls, value: Any) -> Any:
        if value is None:
            return os.getenv(MODEL_ENV_VAR) or DEFAULT_MODEL
        return value


class GenerationRequest(_ServerTarget):
    """Request model for a single image generation."""

    prompt: str = Field(..., description="Image generation prompt")

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for POST /api/generate."""
        payload: dict[str, Any] = {
            "model": self.model,
            "prompt": self.prompt,
            "stream": False,
        }
        # The options field is passed through, never defaulted
        if self.options is not None:
            payload["options"] = self.options
        return payload


class BatchGenerationRequest(_ServerTarget):
    """Request model for generating several images for several prompts."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    prompts: list[str] = Field(..., description="Prompts to generate for, in output order")
    count_per_prompt: int = Field(1, ge=0, description="Images to generate per prompt (0 yields empty results)")
    on_progress: Optional[ProgressCallback] = Field(
        None,
        exclude=True,
        description="Called as on_progress(completed, total) after every generated image",
    )

    @property
    def total_requests(self) -> int:
        """Number of generation calls this batch will issue."""
        return len(self.prompts) * self.count_per_prompt

    def request_for(self, prompt: str) -> GenerationRequest:
        """Build the single-image request for one prompt of this batch."""
        return GenerationRequest(
            host=self.host,
            model=self.model,
            prompt=prompt,
            options=self.options,
        )
