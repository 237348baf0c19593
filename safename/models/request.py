from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class SanitizeRequest(BaseModel):
    name: str = Field(..., description="Raw name to sanitize")
    extension: Optional[str] = Field(None, description="Extension appended after sanitizing (e.g. pdf)")
    options: Optional[Dict[str, Any]] = Field(
        None,
        description="Overrides for padding, length, whitespace and replace; unknown keys are ignored"
    )

    @field_validator('extension')
    @classmethod
    def empty_extension_as_none(cls, v):
        """Treat an empty extension like a missing one"""
        return v or None
