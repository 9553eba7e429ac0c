"""Webhook Schemas — ElevenLabs conversation-initiation payload and reply.

Invariants:
    - All four inbound fields are required strings (validated before the route runs)
    - Outbound keys are camelCase, wrapped in a dynamic_variables envelope

Design Decisions:
    - StrictStr fields: a numeric caller_id is rejected rather than coerced
"""

from pydantic import BaseModel, Field, StrictStr


class ElevenLabsWebhook(BaseModel):
    """Inbound call metadata from the voice-agent platform."""
    caller_id: StrictStr = Field(json_schema_extra={"example": "+15551234567"})
    agent_id: StrictStr = Field(json_schema_extra={"example": "A1"})
    called_number: StrictStr = Field(json_schema_extra={"example": "+15559876543"})
    call_sid: StrictStr = Field(json_schema_extra={"example": "CA123"})


class DynamicVariables(BaseModel):
    callerId: str
    agentId: str
    calledNumber: str
    callSid: str


class DynamicVariablesResponse(BaseModel):
    dynamic_variables: DynamicVariables


class WebhookErrorResponse(BaseModel):
    error: str = "Internal server error"
