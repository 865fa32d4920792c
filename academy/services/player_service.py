"""
Servizio anagrafica giocatori dell'academy.
Unico punto che legge e scrive la tabella players: le righe passano sempre
dall'assembler (academy.pii), i router ricevono solo dati in chiaro.
"""

import logging
import secrets
import string
import time
import uuid
from datetime import date, datetime, timezone
from typing import Any

from sqlalchemy import delete, insert, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from academy.models.player import Player
from academy.pii import to_storage, to_wire
from academy.pii.columns import is_sensitive
from academy.schemas.players import PlayerCreate, PlayerUpdate

logger = logging.getLogger(__name__)

players_table = Player.__table__

CARD_ID_ALPHABET = string.ascii_uppercase + string.digits
DEFAULT_GENDER = "Unknown"

# ---------------------------------------------------------------------------
# Query SQL
# ---------------------------------------------------------------------------

# SELECT * e non le colonne del modello: una riga con colonne mancanti
# o legacy in chiaro resta leggibile.
PLAYER_BY_ID_SQL = text("SELECT * FROM players WHERE id = :player_id")

ACADEMY_PLAYERS_SQL = text("""
SELECT * FROM players
WHERE academy_id = :academy_id
ORDER BY created_at DESC
LIMIT :limit OFFSET :offset
""")

ACADEMY_PLAYERS_COUNT_SQL = text("SELECT COUNT(*) FROM players WHERE academy_id = :academy_id")

ALL_PLAYERS_SQL = text("SELECT * FROM players")
ACADEMY_ALL_PLAYERS_SQL = text("SELECT * FROM players WHERE academy_id = :academy_id")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def calculate_age(dob: str, today: date | None = None) -> int | None:
    """Età in anni compiuti da una data ISO (YYYY-MM-DD...). None se non parsabile."""
    if not dob:
        return None
    try:
        birth = date.fromisoformat(dob[:10])
    except ValueError:
        return None
    today = today or date.today()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def combine_phone(phone: str | None, country_code: str | None) -> str | None:
    """
    Antepone il prefisso internazionale al numero, salvo che il numero
    (ignorando un '+' iniziale) inizi già con il prefisso.
    """
    if not phone or not country_code:
        return phone
    phone_clean = phone.lstrip("+")
    code_clean = country_code.lstrip("+")
    if phone_clean.startswith(code_clean):
        return phone
    return f"{country_code}{phone}"


def generate_player_card_id() -> str:
    return "".join(secrets.choice(CARD_ID_ALPHABET) for _ in range(6))


def _player_view(row: Any) -> dict[str, Any]:
    view = to_wire(row)
    active = view.get("isActive")
    view["isActive"] = True if active is None else bool(active)
    view["age"] = calculate_age(view["dateOfBirth"])
    return view


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


# ---------------------------------------------------------------------------
# Letture
# ---------------------------------------------------------------------------


def get_player(player_id: str, db: Session) -> dict[str, Any] | None:
    row = db.execute(PLAYER_BY_ID_SQL, {"player_id": player_id}).mappings().first()
    if row is None:
        return None
    return _player_view(row)


def list_players(academy_id: str, db: Session, page: int = 1, limit: int = 10) -> dict[str, Any]:
    """Giocatori dell'academy, più recenti prima, paginati."""
    offset = (page - 1) * limit
    total = db.execute(ACADEMY_PLAYERS_COUNT_SQL, {"academy_id": academy_id}).scalar() or 0
    rows = db.execute(
        ACADEMY_PLAYERS_SQL,
        {"academy_id": academy_id, "limit": limit, "offset": offset},
    ).mappings().all()
    players = [_player_view(row) for row in rows]
    logger.info("list_players academy_id=%s page=%s -> %s/%s", academy_id, page, len(players), total)
    return {"players": players, "total": total, "page": page, "limit": limit}


def search_players(
    query: str,
    db: Session,
    academy_id: str | None = None,
    limit: int = 10,
) -> list[dict[str, Any]]:
    """
    Ricerca per nome completo, case-insensitive.
    I nomi sono cifrati: la ricerca avviene in memoria dopo la decodifica.
    """
    if academy_id:
        rows = db.execute(ACADEMY_ALL_PLAYERS_SQL, {"academy_id": academy_id}).mappings().all()
    else:
        rows = db.execute(ALL_PLAYERS_SQL).mappings().all()

    needle = query.lower()
    results = []
    for row in rows:
        view = to_wire(row)
        full_name = f"{view['firstName']} {view['lastName']}".strip()
        if needle not in full_name.lower():
            continue
        results.append({
            "id": view["id"],
            "name": full_name,
            "firstName": view["firstName"],
            "lastName": view["lastName"],
            "position": view.get("position"),
            "currentClub": view["currentClub"],
            "imageUrl": view.get("photoUrl"),
        })
        if len(results) >= limit:
            break
    return results


# ---------------------------------------------------------------------------
# Scritture
# ---------------------------------------------------------------------------


def create_player(payload: PlayerCreate, db: Session) -> dict[str, Any]:
    fields = payload.model_dump(by_alias=True, exclude_none=True)
    fields["phone"] = combine_phone(fields.get("phone"), fields.pop("phoneCountryCode", None))
    if fields["phone"] is None:
        del fields["phone"]

    player_id = str(uuid.uuid4())
    fields.update({
        "id": player_id,
        "playerCardId": generate_player_card_id(),
        "cardId": f"CARD-{int(time.time() * 1000)}",
        "cardQrSignature": f"QR-{player_id}",
        "registrationDate": datetime.now(timezone.utc),
        "isActive": fields.get("isActive", True),
    })
    fields.setdefault("gender", DEFAULT_GENDER)
    if fields.get("guardianName") and "guardianInfo" not in fields:
        guardian_phone = fields.get("guardianPhone") or "No phone"
        fields["guardianInfo"] = f"{fields['guardianName']} - {guardian_phone}"

    db.execute(insert(players_table).values(**to_storage(fields)))
    _commit(db)
    logger.info("Creato giocatore id=%s academy_id=%s", player_id, fields["academyId"])
    return get_player(player_id, db)


def update_player(player_id: str, payload: PlayerUpdate, db: Session) -> dict[str, Any] | None:
    """Update parziale: solo i campi inviati dal client vengono scritti."""
    fields = payload.model_dump(by_alias=True, exclude_unset=True)
    # Campi sensibili vuoti dal form: ignorati, non azzerano il valore salvato
    fields = {k: v for k, v in fields.items() if not (is_sensitive(k) and not v)}
    country_code = fields.pop("phoneCountryCode", None)
    if fields.get("phone"):
        fields["phone"] = combine_phone(fields["phone"], country_code)
    fields["updatedAt"] = datetime.now(timezone.utc)

    result = db.execute(
        update(players_table)
        .where(players_table.c.id == player_id)
        .values(**to_storage(fields))
    )
    if result.rowcount == 0:
        db.rollback()
        return None
    _commit(db)
    logger.info("Aggiornato giocatore id=%s campi=%s", player_id, sorted(fields))
    return get_player(player_id, db)


def delete_player(player_id: str, db: Session) -> bool:
    result = db.execute(delete(players_table).where(players_table.c.id == player_id))
    if result.rowcount == 0:
        db.rollback()
        return False
    _commit(db)
    logger.info("Eliminato giocatore id=%s", player_id)
    return True
