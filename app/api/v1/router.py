from fastapi import APIRouter

from app.api.v1.links import router as links_router

router = APIRouter()
router.include_router(links_router)
