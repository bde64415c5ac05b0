from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from swa_api.errors import register_exception_handlers
from swa_api.logging_config import configure_app_logging
from swa_api.routers import health, protected_data, user_info
from swa_api.security.config import load_security_config
from swa_api.security.dependencies import enforce_security
from swa_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        resolved = settings or get_settings()
        configure_app_logging(resolved.log_level)
        logger.info("App startup beginning")

        config_path = resolved.resolved_security_config_path()
        app.state.security_config = load_security_config(config_path)
        logger.info("Loaded security config: %s", config_path)
        if not app.state.security_config.auth.trust_gateway_header:
            logger.warning("Gateway principal header is not trusted; all requests will be anonymous")

        yield
        # Shutdown (stateless, nothing to clean up)

    # Global dependency: decodes the principal and gates protected routes.
    app = FastAPI(title="swa-api", dependencies=[Depends(enforce_security)], lifespan=lifespan)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(user_info.router)
    app.include_router(protected_data.router)

    return app


app = create_app()
