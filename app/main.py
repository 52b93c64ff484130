from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import Settings, configure_logging, get_settings
from app.infrastructure.database import (
    build_engine,
    create_session_factory,
    initialize_database,
)
from app.interfaces.api.routes import register_routes


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application and the storage it is bound to."""

    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create the tables on startup and release the engine on shutdown."""

        initialize_database(engine)
        yield
        engine.dispose()

    app = FastAPI(title="Access Control API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_routes(app)
    return app
