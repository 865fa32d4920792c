"""
Fixtures condivise. Ogni test usa un database SQLite in memoria
e un'app costruita con create_app, senza DATABASE_URL.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from academy.core.database import create_db_engine, create_session_factory, init_db
from academy.main import create_app


@pytest.fixture
def engine():
    eng = create_db_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app():
    return create_app(database_url="sqlite://")


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def player_payload():
    return {
        "academyId": "academy-1",
        "firstName": "Khalid",
        "lastName": "Benali",
        "dateOfBirth": "2008-03-15",
        "position": "Forward",
        "email": "khalid@example.com",
        "phone": "612345678",
        "phoneCountryCode": "+212",
        "guardianName": "Fatima Benali",
        "guardianPhone": "+212600000000",
        "medicalInfo": "Asma, porta l'inalatore",
        "height": 172,
        "weight": 61.5,
        "jerseyNumber": 9,
    }
