"""Cross-platform filename sanitization."""

from .core.sanitizer import FALLBACK_FILENAME, WINDOWS_RESERVED_NAMES, Sanitizer, sanitize
from .models.options import SanitizeOptions
from .utils.filename import safe_filename

__version__ = "1.0.0"

__all__ = [
    "FALLBACK_FILENAME",
    "WINDOWS_RESERVED_NAMES",
    "SanitizeOptions",
    "Sanitizer",
    "safe_filename",
    "sanitize",
]
