"""Pydantic schemas per API Players. Nomi wire in camelCase tramite alias."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# --- Input ---


class PlayerFields(CamelModel):
    """Campi modificabili dal client. Tutti opzionali: usati anche per l'update parziale."""
    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    email: str | None = None
    phone: str | None = None
    phone_country_code: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    current_club: str | None = None
    guardian_name: str | None = None
    guardian_phone: str | None = None
    guardian_email: str | None = None
    guardian_info: str | None = None
    medical_info: str | None = None
    emergency_contact: str | None = None
    emergency_phone: str | None = None
    playing_history: str | None = None
    internal_notes: str | None = None
    notes: str | None = None

    position: str | None = None
    nationality: str | None = None
    height: int | None = None
    weight: float | None = None
    jersey_number: int | None = None
    preferred_foot: str | None = None
    gender: str | None = None
    photo_url: str | None = None
    training_start_date: date | None = None
    training_end_date: date | None = None
    is_active: bool | None = None

    @field_validator(
        "height", "weight", "jersey_number", "training_start_date", "training_end_date",
        mode="before",
    )
    @classmethod
    def _empty_string_to_none(cls, value):
        """I form inviano "" per i campi numerici e data lasciati vuoti."""
        if value == "":
            return None
        return value


class PlayerCreate(PlayerFields):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    date_of_birth: str = Field(min_length=1)
    position: str = Field(min_length=1)
    academy_id: str = Field(min_length=1)


class PlayerUpdate(PlayerFields):
    pass


# --- Output ---


class PlayerView(CamelModel):
    """Giocatore in chiaro come restituito al client. Mai colonne *_cipher."""
    id: str
    academy_id: str | None = None
    player_card_id: str | None = None

    first_name: str = ""
    last_name: str = ""
    date_of_birth: str = ""
    age: int | None = None
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    country: str = ""
    current_club: str = ""
    guardian_name: str = ""
    guardian_phone: str = ""
    guardian_email: str = ""
    guardian_info: str = ""
    medical_info: str = ""
    emergency_contact: str = ""
    emergency_phone: str = ""
    playing_history: str = ""
    internal_notes: str = ""
    notes: str = ""

    position: str | None = None
    nationality: str | None = None
    height: int | None = None
    weight: float | None = None
    jersey_number: int | None = None
    preferred_foot: str | None = None
    gender: str | None = None
    photo_url: str | None = None
    registration_date: datetime | str | None = None
    training_start_date: date | str | None = None
    training_end_date: date | str | None = None
    card_id: str | None = None
    card_qr_signature: str | None = None
    is_active: bool = True
    created_at: datetime | str | None = None
    updated_at: datetime | str | None = None


class PlayerListResponse(BaseModel):
    players: list[PlayerView]
    total: int
    page: int
    limit: int


class PlayerSearchResult(CamelModel):
    id: str
    name: str
    first_name: str
    last_name: str
    position: str | None = None
    current_club: str = ""
    image_url: str | None = None


# --- Schema status ---


class SchemaStatusResponse(BaseModel):
    table: str
    table_exists: bool
    expected_columns: list[str]
    missing_columns: list[str]
