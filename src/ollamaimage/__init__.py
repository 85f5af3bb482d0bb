"""ollamaimage - Client for the image generation API of a local Ollama server."""

from ollamaimage.interfaces import ProgressCallback
from ollamaimage.models.errors import ErrorCode, OllamaAPIError, is_retryable
from ollamaimage.models.requests import (
    DEFAULT_HOST,
    DEFAULT_MODEL,
    BatchGenerationRequest,
    GenerationRequest,
)
from ollamaimage.models.responses import BatchGenerationResult, GenerationResult
from ollamaimage.services.batch_service import batch_generate_images
from ollamaimage.services.image_service import generate_image

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "generate_image",
    "batch_generate_images",
    # Interfaces
    "ProgressCallback",
    # Request types
    "BatchGenerationRequest",
    "GenerationRequest",
    "DEFAULT_HOST",
    "DEFAULT_MODEL",
    # Response/Error types
    "BatchGenerationResult",
    "GenerationResult",
    "ErrorCode",
    "OllamaAPIError",
    "is_retryable",
]
