"""Response models for ollamaimage."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerationResult(BaseModel):
    """Result for a single generated image."""

    model_config = ConfigDict(frozen=True)

    image_base64: str = Field("", description="Base64-encoded image (empty if the server sent none)")
    # Passed through from the server unvalidated; None when absent
    model: Any = Field(None, description="Model id reported by the server")
    created_at: Any = Field(None, description="Timestamp reported by the server (opaque)")

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "GenerationResult":
        """Map a /api/generate JSON body to a result."""
        image = data.get("image")
        return cls(
            image_base64=image if image is not None else "",
            model=data.get("model"),
            created_at=data.get("created_at"),
        )


class BatchGenerationResult(BaseModel):
    """All results generated for one prompt of a batch."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Prompt the images were generated for")
    results: list[GenerationResult] = Field(default_factory=list, description="Results in generation order")
