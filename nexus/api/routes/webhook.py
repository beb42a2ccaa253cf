"""Webhook endpoint for all messaging platforms."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from nexus.api.dependencies import RouterDep
from nexus.api.exceptions import InvalidRequestError
from nexus.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/webhook/{platform}")
async def receive_webhook(platform: str, request: Request, relay: RouterDep) -> JSONResponse:
    """Route one platform webhook through the conversation engine.

    Returns:
        The platform-formatted reply with status 200, or {"error": ...}
        with 400 for unsupported platforms and unusable payloads

    Raises:
        InvalidRequestError: If the body is not valid JSON
    """
    try:
        payload = await request.json()
    except ValueError as e:
        raise InvalidRequestError("Request body must be valid JSON") from e

    result = await relay.route(platform, payload)

    logger.debug(
        "webhook_routed",
        status_code=result.status_code,
        processing_time_ms=round(result.processing_time_ms, 2),
    )
    return JSONResponse(
        status_code=result.status_code,
        content=result.body,
        headers={"X-Processing-Time-Ms": f"{result.processing_time_ms:.2f}"},
    )
