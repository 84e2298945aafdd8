"""
Pydantic schema for error responses.

Every error returned by the API shares this shape.  ``details`` holds
either a mapping of field name to message (validation failures) or a
plain message string (not found, internal errors).
"""

from datetime import datetime
from typing import Dict, Union

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned with 4xx/5xx responses."""

    timestamp: datetime = Field(..., examples=["2025-09-01T10:00:00"])
    status: int = Field(..., examples=[404])
    error: str = Field(..., examples=["Contact not found"])
    details: Union[Dict[str, str], str]
