"""
JSON Compare Backend - FastAPI Application Entry Point
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jsoncompare.routers import config, diff, json_tools
from jsoncompare.services.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def configure_logging():
    """Set up the root handler; level comes from JSON_COMPARE_LOG_LEVEL"""
    level = os.environ.get("JSON_COMPARE_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    logger.info("Starting JSON Compare Backend...")
    config_manager = ConfigManager.get_instance()
    logger.info("ConfigManager initialized (%s)", config_manager.config_file)

    yield
    logger.info("Shutting down JSON Compare Backend...")


app = FastAPI(
    title="JSON Compare Backend",
    description="Line-level JSON and text comparison service",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(json_tools.router, prefix="/api/json", tags=["json"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "jsoncompare-backend"}


def run():
    """Run the server with the configured host and port"""
    import uvicorn

    configure_logging()
    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=server.get("port", 8000))


if __name__ == "__main__":
    run()
