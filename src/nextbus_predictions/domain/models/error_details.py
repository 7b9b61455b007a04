"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Why a call to the prediction service failed."""

    model_config = ConfigDict(frozen=True)

    reason: str
    status_code: int | None = None
    should_retry: bool = False  # Hint reported by the service itself, never acted on here
