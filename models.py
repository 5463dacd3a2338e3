from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import List

# Literal fallback the model is asked to return when an email has no actions.
NO_ACTION_ITEMS = "No action items found."

class TextRequest(BaseModel):
    """Request body whose fields are interpolated into a prompt as text.

    A null field falls back to its default and any other non-string
    value is used in its str() form.
    """

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, v, info: ValidationInfo):
        if v is None:
            return cls.model_fields[info.field_name].default
        if not isinstance(v, str):
            return str(v)
        return v

class SummarizeRequest(TextRequest):
    subject: str = ""
    body: str = ""

class SummarizeResponse(BaseModel):
    summary: str

class ActionsRequest(TextRequest):
    subject: str = ""
    body: str = ""

class ActionsResponse(BaseModel):
    actions: List[str] = []

class DraftRequest(TextRequest):
    instructions: str = ""
    tone: str = Field(default="professional")

class DraftResponse(BaseModel):
    draft: str

class ImproveRequest(TextRequest):
    content: str = ""

class ImproveResponse(BaseModel):
    improved: str

class ReplyRequest(TextRequest):
    subject: str = ""
    body: str = ""

class ReplyResponse(BaseModel):
    reply: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str = "ok"
    apiKeyConfigured: bool
