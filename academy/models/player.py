"""Player ORM model. Anagrafica giocatore dell'academy; dati sensibili in colonne *_cipher."""

from sqlalchemy import Boolean, Column, Date, DateTime, Float, Integer, LargeBinary, String, Text
from sqlalchemy.sql import func

from academy.core.database import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(String(36), primary_key=True, index=True)
    academy_id = Column(String(36), nullable=True, index=True)
    player_card_id = Column(String(16), nullable=True)

    position = Column(String(64), nullable=True)
    nationality = Column(String(128), nullable=True)
    height_cm = Column(Integer, nullable=True)
    weight_kg = Column(Float, nullable=True)
    jersey_number = Column(Integer, nullable=True)
    preferred_foot = Column(String(16), nullable=True)
    gender = Column(String(32), nullable=True)
    photo_url = Column(Text, nullable=True)

    registration_date = Column(DateTime(timezone=True), nullable=True)
    training_start_date = Column(Date, nullable=True)
    training_end_date = Column(Date, nullable=True)

    card_id = Column(String(64), nullable=True)
    card_qr_signature = Column(String(128), nullable=True)
    is_active = Column(Boolean, nullable=True, default=True)

    # Dati sensibili: BYTEA, scritti e letti solo tramite academy.pii.assembler
    first_name_cipher = Column(LargeBinary, nullable=True)
    last_name_cipher = Column(LargeBinary, nullable=True)
    dob_cipher = Column(LargeBinary, nullable=True)
    email_cipher = Column(LargeBinary, nullable=True)
    phone_cipher = Column(LargeBinary, nullable=True)
    address_cipher = Column(LargeBinary, nullable=True)
    city_cipher = Column(LargeBinary, nullable=True)
    country_cipher = Column(LargeBinary, nullable=True)
    current_club_cipher = Column(LargeBinary, nullable=True)
    guardian_contact_name_cipher = Column(LargeBinary, nullable=True)
    guardian_contact_phone_cipher = Column(LargeBinary, nullable=True)
    guardian_contact_email_cipher = Column(LargeBinary, nullable=True)
    guardian_info_cipher = Column(LargeBinary, nullable=True)
    medical_info_cipher = Column(LargeBinary, nullable=True)
    emergency_contact_cipher = Column(LargeBinary, nullable=True)
    emergency_phone_cipher = Column(LargeBinary, nullable=True)
    playing_history_cipher = Column(LargeBinary, nullable=True)
    internal_notes_cipher = Column(LargeBinary, nullable=True)
    notes_cipher = Column(LargeBinary, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
