"""
API Players: elenco paginato per academy, ricerca per nome, dettaglio,
creazione, update parziale ed eliminazione.
I dati sensibili arrivano e partono in chiaro; la cifratura è nel service.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from academy.core.database import get_db
from academy.schemas.players import (
    PlayerCreate,
    PlayerListResponse,
    PlayerSearchResult,
    PlayerUpdate,
    PlayerView,
)
from academy.services.player_service import (
    create_player,
    delete_player,
    get_player,
    list_players,
    search_players,
    update_player,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/players", tags=["players"])


def _db_error(action: str, e: SQLAlchemyError, **context) -> JSONResponse:
    logger.exception("Errore DB durante %s %s: %s", action, context, e)
    return JSONResponse(
        status_code=500,
        content={
            "error": f"Errore database durante {action}",
            "detail": str(e)[:300],
            **context,
        },
    )


@router.get("", response_model=PlayerListResponse)
def players_list(
    academy_id: str = Query(..., alias="academyId", min_length=1),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Giocatori dell'academy, più recenti prima. Ogni giocatore include l'età calcolata."""
    try:
        return list_players(academy_id=academy_id, db=db, page=page, limit=limit)
    except SQLAlchemyError as e:
        return _db_error("lettura giocatori", e, academy_id=academy_id)


@router.get("/search", response_model=list[PlayerSearchResult])
def players_search(
    q: str = Query(..., min_length=1),
    academy_id: str | None = Query(None, alias="academyId"),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Ricerca case-insensitive su nome e cognome decodificati."""
    try:
        return search_players(query=q, db=db, academy_id=academy_id, limit=limit)
    except SQLAlchemyError as e:
        return _db_error("ricerca giocatori", e, query=q)


@router.get("/{player_id}", response_model=PlayerView)
def player_detail(player_id: str, db: Session = Depends(get_db)):
    try:
        player = get_player(player_id=player_id, db=db)
    except SQLAlchemyError as e:
        return _db_error("lettura giocatore", e, player_id=player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")
    return player


@router.post("", response_model=PlayerView, status_code=201)
def player_create(payload: PlayerCreate, db: Session = Depends(get_db)):
    """Crea il giocatore: id, card id e firma QR generati lato server."""
    try:
        return create_player(payload=payload, db=db)
    except SQLAlchemyError as e:
        return _db_error("creazione giocatore", e, academy_id=payload.academy_id)


@router.put("/{player_id}", response_model=PlayerView)
def player_update(player_id: str, payload: PlayerUpdate, db: Session = Depends(get_db)):
    """Update parziale: i campi non inviati restano invariati."""
    try:
        player = update_player(player_id=player_id, payload=payload, db=db)
    except SQLAlchemyError as e:
        return _db_error("aggiornamento giocatore", e, player_id=player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")
    return player


@router.delete("/{player_id}")
def player_delete(player_id: str, db: Session = Depends(get_db)):
    try:
        deleted = delete_player(player_id=player_id, db=db)
    except SQLAlchemyError as e:
        return _db_error("eliminazione giocatore", e, player_id=player_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Giocatore non trovato")
    return {"deleted": True, "player_id": player_id}
