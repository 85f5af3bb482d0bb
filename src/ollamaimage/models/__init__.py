"""Models package for ollamaimage."""

from ollamaimage.models.errors import ErrorCode, OllamaAPIError, classify_status, is_retryable
from ollamaimage.models.requests import (
    DEFAULT_HOST,
    DEFAULT_MODEL,
    BatchGenerationRequest,
    GenerationRequest,
)
from ollamaimage.models.responses import BatchGenerationResult, GenerationResult

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_MODEL",
    "ErrorCode",
    "OllamaAPIError",
    "classify_status",
    "is_retryable",
    "BatchGenerationRequest",
    "BatchGenerationResult",
    "GenerationRequest",
    "GenerationResult",
]
