"""
ZIP Diff Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routers import compare, config, diff
from services.archive_extractor import ArchiveFormatError
from services.archive_fetcher import ArchiveFetchError
from services.config_manager import ConfigManager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    logger.info("Starting ZIP Diff Backend...")
    config_manager = ConfigManager.get_instance()
    logger.info(f"ConfigManager initialized from {config_manager.config_file}")

    yield
    logger.info("Shutting down ZIP Diff Backend...")


app = FastAPI(
    title="ZIP Diff Backend",
    description="Compare the contents of two ZIP archives",
    version="1.0.0",
    lifespan=lifespan,
)

# The browser front end is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ArchiveFormatError)
async def archive_format_exception_handler(request: Request, exc: ArchiveFormatError):
    """Unreadable archive: reported before any comparison happens"""
    logger.error(f"Failed to read archive on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(ArchiveFetchError)
async def archive_fetch_exception_handler(request: Request, exc: ArchiveFetchError):
    logger.error(f"Failed to fetch archive on {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"error": str(exc)})


# Include routers
app.include_router(compare.router, prefix="/api/compare", tags=["compare"])
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "zipdiff-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))
