from fastapi import Request
import logging
from typing import Any, Optional

from rich.logging import RichHandler

from safename.config.settings import config

logger = logging.getLogger(__name__)

def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from config (rich console handler when enabled)"""
    if config.logging.enable_rich:
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
    else:
        handler = logging.StreamHandler()

    logging.basicConfig(
        level=(level or config.logging.level).upper(),
        format=config.logging.format,
        handlers=[handler],
        force=True
    )

def log_with_context(
    request: Request,
    level: int,
    message: str,
    **kwargs: Any
) -> None:
    """
    Log with request context.
    Automatically includes request_id for tracing.
    """
    extra = {
        "request_id": getattr(request.state, "request_id", "unknown"),
        **kwargs
    }
    logger.log(level, message, extra=extra)

def log_error(request: Request, message: str, **kwargs: Any) -> None:
    log_with_context(request, logging.ERROR, message, **kwargs)

def log_debug(request: Request, message: str, **kwargs: Any) -> None:
    log_with_context(request, logging.DEBUG, message, **kwargs)
