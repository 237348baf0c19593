from fastapi import APIRouter

from safename.config.settings import config

router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "status": "running",
        "service": config.api.title,
        "version": config.api.version
    }


@router.get("/health")
async def health_check():
    """Lightweight health check"""
    return {"status": "ok"}
