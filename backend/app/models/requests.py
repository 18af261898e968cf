"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional


class ValidateRequest(BaseModel):
    """Request to validate a code snippet."""

    code: str = Field(
        ...,
        description="Source code to analyze",
        examples=["funtion foo(){\n  retrun 1\n}"],
    )
    language: Optional[str] = Field(
        default="javascript",
        description="One of javascript, python, java, cpp; anything else is treated as javascript",
    )
