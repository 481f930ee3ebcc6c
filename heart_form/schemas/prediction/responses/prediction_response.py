from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Reason the prediction could not be produced")


class HealthResponse(BaseModel):
    status: str
    detail: Optional[str] = None
