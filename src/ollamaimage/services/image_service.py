"""Single-image generation against an Ollama-style /api/generate endpoint."""

import logging
from typing import Any, Mapping, Union

import httpx

from ollamaimage.models.errors import OllamaAPIError
from ollamaimage.models.requests import GenerationRequest
from ollamaimage.models.responses import GenerationResult

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


def generate_url(host: str) -> str:
    """Return the generate endpoint for a server base URL (host is used verbatim)."""
    return f"{host}{GENERATE_PATH}"


def create_client() -> httpx.AsyncClient:
    """Create the HTTP client used when the caller does not supply one.

    Image generation can take minutes, so no timeout is applied.
    """
    return httpx.AsyncClient(timeout=None)


async def generate_image(
    request: Union[GenerationRequest, Mapping[str, Any]],
    *,
    client: httpx.AsyncClient | None = None,
) -> GenerationResult:
    """
    Generate one image.

    Args:
        request: GenerationRequest, or a mapping with the same fields
            (only "prompt" is required)
        client: Optional httpx.AsyncClient to send the request with. It is left
            open; when omitted a client is created and closed for this call.

    Returns:
        GenerationResult mapped from the server response

    Raises:
        OllamaAPIError: The server answered with a non-2xx status
        httpx.TransportError: The server could not be reached
        pydantic.ValidationError: The request mapping is invalid
    """
    if not isinstance(request, GenerationRequest):
        request = GenerationRequest.model_validate(request)

    if client is not None:
        return await _post_generate(client, request)

    async with create_client() as owned_client:
        return await _post_generate(owned_client, request)


async def _post_generate(client: httpx.AsyncClient, request: GenerationRequest) -> GenerationResult:
    url = generate_url(request.host)
    logger.debug(f"🎨 [ImageService] POST {url} model={request.model} prompt_length={len(request.prompt)}")

    response = await client.post(
        url,
        json=request.to_payload(),
        headers={"Content-Type": "application/json"},
    )

    # Body is not parsed on failure
    if not response.is_success:
        logger.warning(f"❌ [ImageService] {url} returned {response.status_code} {response.reason_phrase}")
        raise OllamaAPIError(response.status_code, response.reason_phrase)

    result = GenerationResult.from_api_response(response.json())
    logger.debug(
        f"✅ [ImageService] Generated image for model={result.model} "
        f"(base64 length {len(result.image_base64)})"
    )
    return result
