"""ElevenLabs Webhook — returns normalized dynamic variables for a call session.

Invariants:
    - Payload validated by Pydantic before the handler runs (400 on bad input)
    - Any extraction error becomes 500 {"error": "Internal server error"}
    - Error detail is logged, never returned

Design Decisions:
    - Transformation lives in core/dynamic_variables.py as a pure function; this
      route only maps its result kind to an HTTP response
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from honc_api.core.domain_types import ExtractionStatus
from honc_api.core.dynamic_variables import extract_dynamic_variables
from honc_api.schemas.errors import ValidationErrorResponse
from honc_api.schemas.webhook import (
    DynamicVariablesResponse, ElevenLabsWebhook, WebhookErrorResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["webhooks"])


@router.post(
    "/elevenlabs-webhook",
    response_model=DynamicVariablesResponse,
    responses={
        200: {"description": "Dynamic variables returned successfully"},
        400: {"model": ValidationErrorResponse, "description": "Invalid request data"},
        500: {"model": WebhookErrorResponse, "description": "Internal server error"},
    },
)
async def elevenlabs_webhook(body: ElevenLabsWebhook):
    """Map call metadata to the agent's dynamic variables."""
    result = extract_dynamic_variables(body.model_dump())
    if result["status"] != ExtractionStatus.OK:
        logger.error(
            f"Webhook extraction failed: {result['message']}",
            extra={"error_code": result["error_code"], "call_sid": body.call_sid},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=WebhookErrorResponse().model_dump(),
        )
    return {"dynamic_variables": result["dynamic_variables"]}
