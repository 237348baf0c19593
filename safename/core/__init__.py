from .sanitizer import FALLBACK_FILENAME, WINDOWS_RESERVED_NAMES, Sanitizer, sanitize

__all__ = ["FALLBACK_FILENAME", "WINDOWS_RESERVED_NAMES", "Sanitizer", "sanitize"]
