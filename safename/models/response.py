from pydantic import BaseModel


class SanitizeResponse(BaseModel):
    """Sanitized name with intermediate results"""
    original: str
    normalized: str
    sanitized: str
    filename: str
    changed: bool
