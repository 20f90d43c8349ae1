import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import config
from backend.api.paths import router as paths_router
from chess_path.config import SearchConfig
from chess_path.lichess import LichessService
from chess_path.search import PathFinder

from chess_path.logging_config import setup_dev_logging, setup_prod_logging
if config.debug:
    setup_dev_logging(level=config.log_level or "DEBUG")
else:
    setup_prod_logging(level=config.log_level)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info("Starting Chess Path API...")

    search_config = config.search_config(SearchConfig.from_env())
    gateway = LichessService.from_config(search_config)
    logger.info(f"LichessService created for {gateway.base_url}")

    app.state.search_config = search_config
    app.state.path_finder = PathFinder(gateway, search_config)
    logger.info(
        f"PathFinder created (max depth {search_config.max_depth}, "
        f"{search_config.games_per_user} games per user, {len(search_config.targets)} targets, timeout {search_config.search_timeout_seconds}s)"
    )

    yield

    logger.info("Chess Path API shutdown complete")

app = FastAPI(
    title="Chess Path API",
    description="Find the chain of Lichess games connecting a player to a chess celebrity",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan
)

app.include_router(paths_router)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Chess Path API",
        "version": "0.1.0",
        "endpoints": ["/api/path", "/api/targets", "/health"],
    }

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logging.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred"
        }
    )

if __name__ == "__main__":
    uvicorn.run(
        "backend.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="info"
    )
