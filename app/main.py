"""
Users API: application factory and entry point.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.errors import register_exception_handlers
from app.api.routes import auth_router, users_router
from app.core.config import Settings, get_settings
from app.core.events import EventDispatcher, UserRegistered, log_user_registered
from app.core.hashids import HashIdCodec
from app.core.logging import configure_logging
from app.db.session import build_engine, build_session_factory, init_models

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the application. Misconfiguration (e.g. a missing hashid salt) fails
    here, before the first request is served.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    codec = HashIdCodec(settings.hashid_options())
    engine = build_engine(settings)

    events = EventDispatcher()
    events.subscribe(UserRegistered, log_user_registered)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.create_tables:
            logger.info("Creating database tables")
            await init_models(engine)
        logger.info("%s ready to accept requests.", settings.app_name)
        yield
        await engine.dispose()

    app = FastAPI(title=settings.app_name, version="1.0.0", debug=settings.debug, lifespan=lifespan)

    app.state.settings = settings
    app.state.hashid_codec = codec
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.events = events

    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/api/v1/auth")
    app.include_router(users_router, prefix="/api/v1/users")

    return app


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
