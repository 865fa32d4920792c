"""
Trasformazione bidirezionale giocatore wire <-> riga di storage.

to_wire: riga grezza (colonne *_cipher + colonne in chiaro) -> dict camelCase in chiaro.
to_storage: payload camelCase -> dict colonna -> valore, con i campi sensibili codificati.

Nessun I/O: la lettura/scrittura su DB resta nel service layer.
"""

from collections.abc import Mapping
from typing import Any

from academy.pii.codec import decode, encode
from academy.pii.columns import (
    LEGACY_COLUMNS,
    PLAINTEXT_COLUMNS,
    SENSITIVE_COLUMNS,
    UnknownAttributeError,
    cipher_column,
)


def encode_attribute(attribute: str, value: Any) -> bytes | None:
    cipher_column(attribute)
    return encode(value)


def decode_attribute(attribute: str, row: Mapping[str, Any]) -> str:
    """
    Decodifica un singolo attributo sensibile dalla riga.
    Colonna mancante (schema non migrato) = valore assente = stringa vuota;
    se vuoto, ripiega sulla colonna legacy in chiaro, se presente.
    """
    value = decode(row.get(cipher_column(attribute)))
    if value:
        return value
    legacy = LEGACY_COLUMNS.get(attribute)
    if legacy is not None:
        return decode(row.get(legacy))
    return ""


def to_wire(row: Mapping[str, Any]) -> dict[str, Any]:
    view: dict[str, Any] = {}
    for attribute, column in PLAINTEXT_COLUMNS.items():
        value = row.get(column)
        if value is None and attribute in LEGACY_COLUMNS:
            value = row.get(LEGACY_COLUMNS[attribute])
        if value is not None or column in row:
            view[attribute] = value
    for attribute in SENSITIVE_COLUMNS:
        view[attribute] = decode_attribute(attribute, row)
    return view


def to_storage(view: Mapping[str, Any]) -> dict[str, Any]:
    """
    Solo gli attributi presenti nel payload finiscono nella riga:
    un update parziale non azzera gli altri campi cifrati.
    """
    row: dict[str, Any] = {}
    for attribute, value in view.items():
        if attribute in SENSITIVE_COLUMNS:
            row[SENSITIVE_COLUMNS[attribute]] = encode(value)
        elif attribute in PLAINTEXT_COLUMNS:
            row[PLAINTEXT_COLUMNS[attribute]] = value
        else:
            raise UnknownAttributeError(attribute)
    return row
