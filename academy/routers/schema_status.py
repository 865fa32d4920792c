"""Endpoint di verifica schema: colonne del modello Player assenti nel database."""

from fastapi import APIRouter, Request
from sqlalchemy import inspect

from academy.core.database import missing_player_columns
from academy.models.player import Player
from academy.schemas.players import SchemaStatusResponse

router = APIRouter(prefix="/api/schema", tags=["debug"])


@router.get("/players", response_model=SchemaStatusResponse)
def players_schema(request: Request):
    """
    Confronta la tabella players reale con il modello.
    Solo per sviluppo/debug; non espone dati.
    """
    engine = request.app.state.engine
    return SchemaStatusResponse(
        table="players",
        table_exists="players" in inspect(engine).get_table_names(),
        expected_columns=[col.name for col in Player.__table__.columns],
        missing_columns=missing_player_columns(engine),
    )
