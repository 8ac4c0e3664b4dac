from fastapi import APIRouter

from core.metadata import SERVICE_NAME, VERSION

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": SERVICE_NAME, "version": VERSION}
