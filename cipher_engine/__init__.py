"""
Classical ciphers over the Latin alphabet.

Currently only the Shift Cipher is implemented. It is a teaching tool, not
a way to keep anything secret.
"""

from .engine import CIPHER_REGISTRY, CipherStrategy, get_cipher, register_cipher
from .errors import EncodingError, InvalidCiphertext, InvalidKey, InvalidMessage
from .shift import Key, ShiftCipher, brute_force, decrypt, encrypt
from .text import Ciphertext, Message

__version__ = "0.1.0"

__all__ = [
    "CIPHER_REGISTRY",
    "CipherStrategy",
    "Ciphertext",
    "EncodingError",
    "InvalidCiphertext",
    "InvalidKey",
    "InvalidMessage",
    "Key",
    "Message",
    "ShiftCipher",
    "brute_force",
    "decrypt",
    "encrypt",
    "get_cipher",
    "register_cipher",
]
