"""Mappa fissa attributo (wire, camelCase) -> colonna fisica della tabella players."""

CIPHER_SUFFIX = "_cipher"

# Attributi sensibili: colonna <nome>_cipher, BYTEA.
SENSITIVE_COLUMNS: dict[str, str] = {
    "firstName": "first_name_cipher",
    "lastName": "last_name_cipher",
    "dateOfBirth": "dob_cipher",
    "email": "email_cipher",
    "phone": "phone_cipher",
    "address": "address_cipher",
    "city": "city_cipher",
    "country": "country_cipher",
    "currentClub": "current_club_cipher",
    "guardianName": "guardian_contact_name_cipher",
    "guardianPhone": "guardian_contact_phone_cipher",
    "guardianEmail": "guardian_contact_email_cipher",
    "guardianInfo": "guardian_info_cipher",
    "medicalInfo": "medical_info_cipher",
    "emergencyContact": "emergency_contact_cipher",
    "emergencyPhone": "emergency_phone_cipher",
    "playingHistory": "playing_history_cipher",
    "internalNotes": "internal_notes_cipher",
    "notes": "notes_cipher",
}

# Attributi in chiaro, copiati senza trasformazioni.
PLAINTEXT_COLUMNS: dict[str, str] = {
    "id": "id",
    "academyId": "academy_id",
    "playerCardId": "player_card_id",
    "position": "position",
    "nationality": "nationality",
    "height": "height_cm",
    "weight": "weight_kg",
    "jerseyNumber": "jersey_number",
    "preferredFoot": "preferred_foot",
    "gender": "gender",
    "photoUrl": "photo_url",
    "registrationDate": "registration_date",
    "trainingStartDate": "training_start_date",
    "trainingEndDate": "training_end_date",
    "cardId": "card_id",
    "cardQrSignature": "card_qr_signature",
    "isActive": "is_active",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

# Colonne in chiaro dello schema pre-cifratura, usate solo in lettura
# quando la colonna principale è vuota.
LEGACY_COLUMNS: dict[str, str] = {
    "firstName": "first_name",
    "lastName": "last_name",
    "dateOfBirth": "date_of_birth",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "city": "city",
    "country": "country",
    "currentClub": "current_club",
    "guardianName": "parent_name",
    "guardianPhone": "parent_phone",
    "guardianEmail": "parent_email",
    "medicalInfo": "medical_info",
    "emergencyContact": "emergency_contact",
    "emergencyPhone": "emergency_phone",
    "notes": "notes",
    "height": "height",
    "weight": "weight",
}


class UnknownAttributeError(LookupError):
    """Attributo non presente nella mappa: errore di integrazione codice/schema."""

    def __init__(self, attribute: str):
        super().__init__(f"Attributo giocatore sconosciuto: {attribute!r}")
        self.attribute = attribute


def cipher_column(attribute: str) -> str:
    try:
        return SENSITIVE_COLUMNS[attribute]
    except KeyError:
        raise UnknownAttributeError(attribute) from None


def is_sensitive(attribute: str) -> bool:
    return attribute in SENSITIVE_COLUMNS
