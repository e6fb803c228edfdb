"""Schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus which database backend the service is talking to."""

    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV of the running service")
    driver: str = Field(description="SQLAlchemy dialect name, e.g. postgresql or sqlite")
    database: Literal["connected", "disconnected"]
