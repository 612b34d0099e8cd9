"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_api.api import auth, comments, images, interactions, recipes, users
from recipe_api.api.errors import install_error_handlers
from recipe_api.api.rate_limits import limiter
from recipe_api.app_logging import configure_logging
from recipe_api.config import parse_cors_origins
from recipe_api.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Recipe API")
    app.state.container = container
    limiter.enabled = container.settings.rate_limit_enabled
    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(recipes.router)
    app.include_router(interactions.router)
    app.include_router(comments.router)
    app.include_router(images.router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Recipe API configured",
        extra={
            "environment": container.settings.environment,
            "rate_limit_enabled": limiter.enabled,
        },
    )
    return app
