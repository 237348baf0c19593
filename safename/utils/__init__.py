from .filename import clean_extension, reserve_extension, safe_filename

__all__ = ["clean_extension", "reserve_extension", "safe_filename"]
