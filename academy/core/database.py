"""SQLAlchemy engine factory, session dependency e migrazione automatica."""

import logging

from fastapi import Request
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """
    Crea l'engine per l'URL dato. Chiamata una sola volta da create_app.
    SQLite in memoria (test) usa una sola connessione condivisa.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    return create_engine(database_url, pool_pre_ping=True, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """Dependency that yields a DB session from the app's session factory."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def missing_player_columns(engine: Engine) -> list[str]:
    """Colonne del modello Player assenti nella tabella players reale."""
    from academy.models.player import Player

    insp = inspect(engine)
    if "players" not in insp.get_table_names():
        return [col.name for col in Player.__table__.columns]
    existing = {col["name"] for col in insp.get_columns("players")}
    return [col.name for col in Player.__table__.columns if col.name not in existing]


def _migrate_players(engine: Engine) -> None:
    """
    Migrazione additiva per players: aggiunge le colonne *_cipher e i campi
    anagrafici introdotti dopo la creazione della tabella.

    Idempotente: controlla quali colonne esistono prima di agire.
    Colonne legacy in chiaro (first_name, parent_name, ...) non vengono toccate.
    """
    from academy.models.player import Player

    insp = inspect(engine)
    if "players" not in insp.get_table_names():
        return

    existing_cols = {col["name"] for col in insp.get_columns("players")}
    logger.info("players: colonne esistenti = %s", sorted(existing_cols))

    added = []
    with engine.begin() as conn:
        for column in Player.__table__.columns:
            if column.name in existing_cols:
                continue
            col_type = column.type.compile(dialect=engine.dialect)
            conn.execute(text(f"ALTER TABLE players ADD COLUMN {column.name} {col_type}"))
            added.append(column.name)

    if added:
        logger.info("players: aggiunte %s colonne: %s", len(added), added)
    else:
        logger.info("players: schema già aggiornato, nessuna modifica")


def init_db(engine: Engine) -> None:
    """
    Crea tutte le tabelle e applica migrazioni automatiche.
    I modelli devono essere importati prima per registrare i metadata.
    """
    from academy.models import player  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("create_all completato")

    try:
        _migrate_players(engine)
    except Exception as e:
        logger.exception("Errore durante migrazione players: %s", e)
