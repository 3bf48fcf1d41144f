"""Response bodies shared by several routers."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Body of every error produced by the exception handlers."""

    detail: str = Field(..., description="Message safe to show to end users")
    code: str = Field(..., description="Stable machine-readable error code")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Invalid sort order", "code": "INVALID_SORT"},
        },
    )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = Field(..., description="Always 'healthy' when reachable")
    version: str
    api_versions: list[str] = Field(default_factory=list)
