from fastapi import APIRouter

from .health import router as health_router
from .puzzles import router as puzzles_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(puzzles_router)
