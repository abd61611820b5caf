import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .core.config import settings
from .services.sudoku import PuzzleScraper

logging.basicConfig(
    level=getattr(logging, settings.SUDOKU_LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Chrome starts lazily on the first puzzle request
    app.state.puzzle_scraper = PuzzleScraper.from_settings(settings)
    app.state.scrape_lock = asyncio.Lock()
    logger.info("Puzzle scraper ready")
    try:
        yield
    finally:
        await app.state.puzzle_scraper.session.close()
        app.state.puzzle_scraper = None
        logger.info("Puzzle scraper shut down")


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION or "0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)

app.include_router(router)
