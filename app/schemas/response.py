from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    status: str = Field("ok", examples=["ok"])


class ErrorMessage(BaseModel):
    error: str = Field(..., examples=["missing station"])
