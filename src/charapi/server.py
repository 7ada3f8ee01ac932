"""Character API application.

Mounts the auth and character routers on a FastAPI app that owns its own
in-memory stores.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import __version__
from .api import auth_router, characters_router
from .config import AppConfig
from .core.errors import register_error_handlers
from .core.logging import configure_logging
from .repositories import ROLE_ADMIN
from .state import AppState


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Character API started (port {app.state.store.config.port})")
    yield
    logger.info("Character API shutting down")


def seed_admin(state: AppState) -> None:
    """Create the configured admin account, if any, unless it already exists."""
    config = state.config
    if not (config.admin_email and config.admin_password):
        return

    if state.users.email_exists(config.admin_email):
        logger.info(f"Admin {config.admin_email} already exists")
        return

    state.users.create(config.admin_email, config.admin_password, role=ROLE_ADMIN)
    logger.info(f"Seeded admin user {config.admin_email}")


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = AppConfig.from_env()

    app = FastAPI(
        title="Character API",
        description="User auth with JWT and role-gated character CRUD",
        version=__version__,
        lifespan=lifespan,
    )

    state = AppState(config=config)
    seed_admin(state)
    app.state.store = state

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(characters_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    return app


# Create app instance
app = create_app()


def run():
    """Run the server."""
    import uvicorn

    config = AppConfig.from_env()
    configure_logging(config.log_level)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run()
