from typing import Any

from fastapi import APIRouter, Request

from ...schemas.sudoku import HealthRead

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthRead)
async def health(request: Request) -> dict[str, Any]:
    scraper = getattr(request.app.state, "puzzle_scraper", None)
    return {"status": "ok", "driver_live": bool(scraper and scraper.session.is_live)}
