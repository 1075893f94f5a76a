"""
Merge Engine Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import compare, config
from services.config_manager import ConfigManager
from services.logging_utils import configure_logging

logger = logging.getLogger("merge_engine")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    # Startup: load configuration and size the session registry
    config_manager = ConfigManager.get_instance()
    settings = config_manager.get_config()
    configure_logging(settings.get("logLevel", "INFO"))
    logger.info("Starting Merge Engine Backend...")
    logger.info("ConfigManager initialized from %s", config_manager.config_file)

    max_sessions = settings.get("sessions", {}).get("maxSessions", 100)
    compare.sessions.resize(max_sessions if type(max_sessions) is int else 100)
    logger.info("Session registry holds up to %d sessions", compare.sessions.max_sessions)

    yield
    # Shutdown: sessions are in-memory only
    compare.sessions.clear()
    logger.info("Shutting down Merge Engine Backend...")


app = FastAPI(
    title="Merge Engine Backend",
    description="Interactive diff and selective merge for code and text",
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
app.include_router(compare.router, prefix="/api/compare", tags=["compare"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "merge-engine-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 8000))
