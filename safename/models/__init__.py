from .options import DEFAULT_LENGTH, SanitizeOptions
from .request import SanitizeRequest
from .response import SanitizeResponse

__all__ = ["DEFAULT_LENGTH", "SanitizeOptions", "SanitizeRequest", "SanitizeResponse"]
