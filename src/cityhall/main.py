# src/cityhall/main.py

"""Main FastAPI application for the City Hall game backend."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .api import city, leaderboard, maps, player
from .config import Settings, get_settings
from .exceptions import CityHallError
from .middleware import BodySizeLimitMiddleware, RequestLoggingMiddleware
from .services.game_state import GameStateStore

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration once the server is up."""
    logger.info("Server running on port %d", settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info(
        "Google Maps API Key configured: %s",
        "Yes" if settings.maps_key_configured else "No",
    )
    logger.info(
        "Registration emails: %s",
        (
            f"enabled ({settings.notify_email_to})"
            if settings.email_enabled
            else "disabled"
        ),
    )
    yield
    # Shutdown: in-memory state is discarded with the process
    logger.info(
        "Shutting down with %d registered player(s)", app.state.store.player_count
    )


app = FastAPI(title="City Hall Selfie API", lifespan=lifespan)

# One store per process, shared by every request handler
app.state.store = GameStateStore()

# Add middleware (order matters - last added = outermost)
app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(CityHallError)
async def cityhall_error_handler(request: Request, exc: CityHallError) -> JSONResponse:
    """Catch-all for any other City Hall errors -> 500."""
    logger.error("City Hall error: %s", exc.message, extra=exc.details, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message, "error_type": type(exc).__name__},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred"},
    )


# Include routers into the main application
app.include_router(maps.router)
app.include_router(player.router)
app.include_router(leaderboard.router)
app.include_router(city.router)


@app.get("/", tags=["Root"], response_model=None)
async def read_root(
    config: Settings = Depends(get_settings),
) -> FileResponse | JSONResponse:
    """Serve the front-end entry point."""
    index = Path(config.static_dir) / "index.html"
    if not index.is_file():
        logger.warning("Front-end entry point %s not found", index)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Front end not installed"},
        )
    return FileResponse(index)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


# Static assets are mounted last so API routes take precedence
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")
else:
    logger.warning(
        "Static directory %s not found; assets not served", settings.static_dir
    )
