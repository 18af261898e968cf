"""API response models."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional, Literal


class LanguageResponse(BaseModel):
    """A supported language as shown in the editor's language picker."""

    id: str
    display_name: str
    file_extension: str
    rule_count: int
    rewrite_count: int
    is_default: bool = False

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "unhealthy", "degraded"]
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    dependencies: dict[str, HealthDependency]
