"""Service layer giocatori su SQLite in memoria."""
from __future__ import annotations

from datetime import date

from sqlalchemy import text

from academy.schemas.players import PlayerCreate, PlayerUpdate
from academy.services.player_service import (
    calculate_age,
    combine_phone,
    create_player,
    delete_player,
    generate_player_card_id,
    get_player,
    list_players,
    search_players,
    update_player,
)


def _create(db, **overrides):
    data = {
        "academyId": "academy-1",
        "firstName": "Sara",
        "lastName": "Ali",
        "dateOfBirth": "2010-06-01",
        "position": "Midfielder",
    }
    data.update(overrides)
    return create_player(PlayerCreate(**data), db=db)


def test_calculate_age():
    today = date(2026, 10, 19)
    assert calculate_age("2010-10-19", today=today) == 16
    assert calculate_age("2010-10-20", today=today) == 15
    assert calculate_age("2010-10-20T00:00:00.000Z", today=today) == 15
    assert calculate_age("", today=today) is None
    assert calculate_age("not a date", today=today) is None


def test_combine_phone():
    assert combine_phone("612345678", "+212") == "+212612345678"
    assert combine_phone("+212612345678", "+212") == "+212612345678"
    assert combine_phone("212612345678", "212") == "212612345678"
    assert combine_phone("612345678", None) == "612345678"
    assert combine_phone(None, "+212") is None


def test_generate_player_card_id():
    card_id = generate_player_card_id()
    assert len(card_id) == 6
    assert card_id.isalnum() and card_id.upper() == card_id


def test_create_stores_ciphertext_not_plaintext(db):
    player = _create(db, medicalInfo="Allergia alle arachidi")
    raw = db.execute(
        text("SELECT first_name_cipher, medical_info_cipher, position FROM players WHERE id = :id"),
        {"id": player["id"]},
    ).mappings().one()
    assert bytes(raw["first_name_cipher"]) == b"Sara"
    assert bytes(raw["medical_info_cipher"]) == "Allergia alle arachidi".encode("utf-8")
    assert raw["position"] == "Midfielder"


def test_create_generates_identifiers(db):
    player = _create(db, guardianName="Omar Ali")
    assert player["cardQrSignature"] == f"QR-{player['id']}"
    assert player["cardId"].startswith("CARD-")
    assert len(player["playerCardId"]) == 6
    assert player["gender"] == "Unknown"
    assert player["isActive"] is True
    assert player["guardianInfo"] == "Omar Ali - No phone"
    assert player["registrationDate"] is not None


def test_get_missing_player(db):
    assert get_player("does-not-exist", db=db) is None


def test_partial_update_keeps_other_fields(db):
    player = _create(db, email="sara@example.com")
    updated = update_player(player["id"], PlayerUpdate(firstName="New"), db=db)
    assert updated["firstName"] == "New"
    assert updated["lastName"] == "Ali"
    assert updated["email"] == "sara@example.com"
    assert updated["dateOfBirth"] == "2010-06-01"


def test_update_phone_with_country_code(db):
    player = _create(db)
    updated = update_player(
        player["id"], PlayerUpdate(phone="612345678", phoneCountryCode="+212"), db=db
    )
    assert updated["phone"] == "+212612345678"


def test_update_missing_player(db):
    assert update_player("does-not-exist", PlayerUpdate(firstName="X"), db=db) is None


def test_list_players_paginated_by_academy(db):
    for i in range(3):
        _create(db, firstName=f"Player{i}")
    _create(db, academyId="academy-2")

    result = list_players("academy-1", db=db, page=1, limit=2)
    assert result["total"] == 3
    assert len(result["players"]) == 2
    second = list_players("academy-1", db=db, page=2, limit=2)
    assert len(second["players"]) == 1
    assert all(p["age"] is not None for p in result["players"])


def test_search_is_case_insensitive_on_decoded_names(db):
    _create(db, firstName="Khalid", lastName="Benali")
    _create(db, firstName="Amina", lastName="Haddad")
    _create(db, academyId="academy-2", firstName="Khalida", lastName="Rossi")

    results = search_players("khal", db=db)
    assert {r["name"] for r in results} == {"Khalid Benali", "Khalida Rossi"}

    scoped = search_players("KHAL", db=db, academy_id="academy-1")
    assert [r["name"] for r in scoped] == ["Khalid Benali"]

    assert len(search_players("a", db=db, limit=1)) == 1


def test_delete_player(db):
    player = _create(db)
    assert delete_player(player["id"], db=db) is True
    assert get_player(player["id"], db=db) is None
    assert delete_player(player["id"], db=db) is False


def test_reads_legacy_representations_from_storage(db):
    db.execute(
        text(
            "INSERT INTO players (id, academy_id, first_name_cipher, last_name_cipher, city_cipher) "
            "VALUES (:id, :academy_id, :first, :last, :city)"
        ),
        {
            "id": "legacy-1",
            "academy_id": "academy-1",
            "first": "\\x" + "Khalid".encode("utf-8").hex(),
            "last": b"Amina",
            "city": "Rabat",
        },
    )
    db.commit()
    player = get_player("legacy-1", db=db)
    assert player["firstName"] == "Khalid"
    assert player["lastName"] == "Amina"
    assert player["city"] == "Rabat"
    assert player["email"] == ""
    assert player["isActive"] is True


def test_update_skips_empty_sensitive_values(db):
    player = _create(db, email="sara@example.com", notes="vecchie note")
    updated = update_player(player["id"], PlayerUpdate(email="", notes=None, city="Rabat"), db=db)
    assert updated["email"] == "sara@example.com"
    assert updated["notes"] == "vecchie note"
    assert updated["city"] == "Rabat"
