"""FastAPI application entry point."""

import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import get_settings
from api.errors import register_exception_handlers
from api.routes import auth, health
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.indexes import ensure_all_indexes
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = Path(__file__).parent.parent.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Auth API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load settings, configure logging, ensure indexes."""
    settings = get_settings()
    setup_structured_logging(settings.log_level)

    client = get_mongodb_client(settings.mongo_url)
    if client:
        if ensure_all_indexes(client[settings.database_name]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


def _add_cors(app: FastAPI) -> None:
    """Allow the configured client origins.

    Credentials cannot be combined with the "*" wildcard in browsers, so
    they are only enabled for an explicit origin list.
    """
    origins = get_settings().cors_origin_list
    allow_credentials = origins != ["*"]
    if not allow_credentials:
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains"
        )
    else:
        logger.info(f"CORS configured with specific origins: {origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=SERVICE_NAME,
        description="Credential-based authentication: register, login and current user",
        version=VERSION,
        lifespan=lifespan,
    )
    _add_cors(app)
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": f"{SERVICE_NAME} is running", "version": VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    # Application logs go through structured logging; uvicorn's access log would duplicate them
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port, access_log=False)
