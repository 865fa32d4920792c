"""Migrazione additiva players: aggiunge le colonne mancanti ed è rieseguibile."""
from __future__ import annotations

from sqlalchemy import inspect, text

from academy.core.database import create_db_engine, create_session_factory, init_db, missing_player_columns
from academy.services.player_service import get_player

LEGACY_PLAYERS_DDL = """
CREATE TABLE players (
    id VARCHAR(36) PRIMARY KEY,
    academy_id VARCHAR(36),
    first_name TEXT,
    last_name TEXT,
    parent_name TEXT,
    position VARCHAR(64),
    first_name_cipher BLOB
)
"""


def _legacy_engine():
    engine = create_db_engine("sqlite://")
    with engine.begin() as conn:
        conn.execute(text(LEGACY_PLAYERS_DDL))
        conn.execute(text(
            "INSERT INTO players (id, academy_id, first_name, last_name, parent_name, position) "
            "VALUES ('old-1', 'academy-1', 'Youssef', 'Tazi', 'Rachid Tazi', 'Defender')"
        ))
    return engine


def test_migration_adds_missing_columns():
    engine = _legacy_engine()
    assert "notes_cipher" in missing_player_columns(engine)

    init_db(engine)

    columns = {col["name"] for col in inspect(engine).get_columns("players")}
    assert "notes_cipher" in columns
    assert "internal_notes_cipher" in columns
    assert "first_name" in columns
    assert missing_player_columns(engine) == []


def test_migration_is_idempotent():
    engine = _legacy_engine()
    init_db(engine)
    init_db(engine)
    assert missing_player_columns(engine) == []


def test_migrated_legacy_row_reads_plaintext_fallback():
    engine = _legacy_engine()
    init_db(engine)
    db = create_session_factory(engine)()
    try:
        player = get_player("old-1", db=db)
    finally:
        db.close()
    assert player["firstName"] == "Youssef"
    assert player["lastName"] == "Tazi"
    assert player["guardianName"] == "Rachid Tazi"
    assert player["position"] == "Defender"
    assert player["notes"] == ""
