from typing import Any

from pydantic import BaseModel, field_validator


class GenerateRequest(BaseModel):
    animal: str = ""

    @field_validator("animal", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class GenerateResult(BaseModel):
    result: str


class ErrorDetail(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail


def error_body(message: str) -> dict[str, Any]:
    return ErrorResponse(error=ErrorDetail(message=message)).model_dump()


class HealthStatus(BaseModel):
    ok: bool
    openai_configured: bool
