"""Academy Players API — anagrafica giocatori con dati sensibili cifrati a riposo."""

import logging

from fastapi import FastAPI

from academy.core.config import get_database_url, get_log_level
from academy.core.database import create_db_engine, create_session_factory, init_db
from academy.routers import health_router, players_router, schema_status_router

logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    """
    Costruisce l'app con il proprio engine. Engine e session factory vivono
    su app.state e arrivano agli handler tramite la dependency get_db.
    """
    app = FastAPI(
        title="Academy Players API",
        description="Player records for football academies. Sensitive fields are stored in *_cipher columns.",
        version="0.1.0",
    )

    engine = create_db_engine(database_url or get_database_url())
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.include_router(health_router)
    app.include_router(players_router)
    app.include_router(schema_status_router)

    @app.on_event("startup")
    def on_startup():
        """Inizializza le tabelle e applica le migrazioni additive all'avvio."""
        logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
        init_db(engine)

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()
        logger.info("Engine chiuso")

    return app
