"""Batch orchestration: several images for several prompts, one request at a time."""

import logging
from typing import Any, Mapping, Union

import httpx

from ollamaimage.models.requests import BatchGenerationRequest
from ollamaimage.models.responses import BatchGenerationResult, GenerationResult
from ollamaimage.services.image_service import create_client, generate_image

logger = logging.getLogger(__name__)


async def batch_generate_images(
    request: Union[BatchGenerationRequest, Mapping[str, Any]],
    *,
    client: httpx.AsyncClient | None = None,
) -> list[BatchGenerationResult]:
    """
    Generate count_per_prompt images for every prompt, sequentially.

    Requests are awaited one after another so the server never sees more than
    one generation in flight and progress is reported in completion order.
    The first failure aborts the batch and propagates; no partial results are
    returned.

    Args:
        request: BatchGenerationRequest, or a mapping with the same fields
        client: Optional httpx.AsyncClient reused for every request (left open)

    Returns:
        One BatchGenerationResult per prompt, in prompt order
    """
    if not isinstance(request, BatchGenerationRequest):
        request = BatchGenerationRequest.model_validate(request)

    if not request.prompts:
        return []

    if client is not None:
        return await _run_batch(client, request)

    async with create_client() as owned_client:
        return await _run_batch(owned_client, request)


async def _run_batch(client: httpx.AsyncClient, request: BatchGenerationRequest) -> list[BatchGenerationResult]:
    total = request.total_requests
    completed = 0
    logger.debug(
        f"📦 [BatchService] Starting batch: {len(request.prompts)} prompt(s) x "
        f"{request.count_per_prompt} = {total} image(s)"
    )

    batch_results: list[BatchGenerationResult] = []

    for prompt in request.prompts:
        generation_request = request.request_for(prompt)
        results: list[GenerationResult] = []

        for _ in range(request.count_per_prompt):
            result = await generate_image(generation_request, client=client)
            results.append(result)
            completed += 1
            if request.on_progress is not None:
                request.on_progress(completed, total)

        batch_results.append(BatchGenerationResult(prompt=prompt, results=results))

    logger.debug(f"✅ [BatchService] Batch finished: {completed}/{total} image(s)")
    return batch_results
