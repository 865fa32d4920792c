"""
Campi sensibili del giocatore: codec, mappa colonne e assembler wire/storage.
I router non accedono mai direttamente alle colonne *_cipher.
"""

from academy.pii.assembler import decode_attribute, encode_attribute, to_storage, to_wire
from academy.pii.codec import decode, encode
from academy.pii.columns import SENSITIVE_COLUMNS, UnknownAttributeError, cipher_column

__all__ = [
    "decode",
    "encode",
    "decode_attribute",
    "encode_attribute",
    "to_storage",
    "to_wire",
    "SENSITIVE_COLUMNS",
    "UnknownAttributeError",
    "cipher_column",
]
