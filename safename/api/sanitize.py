from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from safename.config.settings import config
from safename.core.logging import log_debug, log_error
from safename.core.sanitizer import Sanitizer
from safename.models.request import SanitizeRequest
from safename.models.response import SanitizeResponse
from safename.utils.filename import reserve_extension

router = APIRouter()


class SanitizeService:
    """Run the sanitizer for one request"""

    @staticmethod
    def run(name: str, extension: Optional[str] = None, options: Optional[dict] = None) -> SanitizeResponse:
        """
        Merge request options over the configured defaults, then
        sanitize. Room for the extension is reserved through padding.
        """
        merged, suffix = reserve_extension(config.defaults.merged(options), extension)

        sanitizer = Sanitizer(name, merged)
        filename = sanitizer.truncate() + suffix
        return SanitizeResponse(
            original=name,
            normalized=sanitizer.normalize(),
            sanitized=sanitizer.sanitize(),
            filename=filename,
            changed=filename != name
        )


def check_name_length(name: str) -> None:
    if len(name) > config.api.max_name_length:
        raise HTTPException(
            status_code=422,
            detail=f"Name exceeds {config.api.max_name_length} characters"
        )


@router.post("/sanitize", response_model=SanitizeResponse)
async def sanitize_name(request: Request, body: SanitizeRequest):
    """Sanitize a name with optional extension and option overrides"""
    check_name_length(body.name)

    try:
        result = SanitizeService.run(body.name, body.extension, body.options)
    except ValueError as e:
        # Option values of the wrong type, or an extension that leaves no room
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        log_error(request, f"Sanitize error: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    log_debug(request, f"Sanitized {body.name!r} -> {result.filename!r}")
    return result


@router.get("/sanitize", response_model=SanitizeResponse)
async def sanitize_query(
    request: Request,
    name: str = Query(..., description="Raw name to sanitize"),
    extension: Optional[str] = Query(None, description="Extension appended after sanitizing")
):
    """Sanitize a name using the configured default options"""
    check_name_length(name)

    try:
        result = SanitizeService.run(name, extension or None)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    log_debug(request, f"Sanitized {name!r} -> {result.filename!r}")
    return result
