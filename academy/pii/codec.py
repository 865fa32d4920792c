"""
Codec per i campi sensibili del giocatore.

Il valore a riposo è la sequenza UTF-8 del testo, salvata in una colonna BYTEA.
In lettura lo stesso campo può arrivare in tre forme, a seconda di chi l'ha scritto:

1. stringa con marker ``\\x`` seguita da cifre esadecimali (BYTEA serializzato
   come testo, es. dall'API REST di Supabase);
2. buffer binario (``bytes``, ``bytearray`` o ``memoryview`` da psycopg2);
3. stringa in chiaro mai codificata.

:func:`decode` riconosce le tre forme in quest'ordine e non solleva mai eccezioni.
"""

import logging
import string
from typing import Any

logger = logging.getLogger(__name__)

HEX_MARKER = "\\x"

BINARY_TYPES = (bytes, bytearray, memoryview)

HEX_DIGITS = frozenset(string.hexdigits)


def encode(plaintext: Any) -> bytes | None:
    """Testo -> bytes UTF-8. Stringa vuota o None -> None (colonna NULL)."""
    if plaintext is None:
        return None
    if not isinstance(plaintext, str):
        plaintext = str(plaintext)
    if plaintext == "":
        return None
    return plaintext.encode("utf-8")


def _utf8(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Valore cifrato non UTF-8 (%s bytes), decodifica con sostituzione", len(raw))
        return raw.decode("utf-8", errors="replace")


def _leading_hex(digits: str) -> bytes:
    """Bytes della coppia di cifre esadecimali più lunga in testa; si ferma alla prima non valida."""
    end = 0
    while end + 1 < len(digits) and digits[end] in HEX_DIGITS and digits[end + 1] in HEX_DIGITS:
        end += 2
    return bytes.fromhex(digits[:end])


def decode(value: Any) -> str:
    """Valore a riposo -> testo. None -> stringa vuota."""
    if value is None:
        return ""

    if isinstance(value, str):
        if value.startswith(HEX_MARKER):
            try:
                raw = bytes.fromhex(value[len(HEX_MARKER):])
            except ValueError:
                logger.warning("Valore con marker \\x non esadecimale, decodificato solo il prefisso valido")
                raw = _leading_hex(value[len(HEX_MARKER):])
            return _utf8(raw)
        return value

    if isinstance(value, BINARY_TYPES):
        return _utf8(bytes(value))

    return str(value)
