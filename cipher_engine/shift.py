"""
The Latin Shift Cipher.

Plaintexts, ciphertexts and keys all live in Z/26Z. Encryption adds the key
to every letter and decryption subtracts it. With only 26 keys the cipher
offers no confidentiality: ``brute_force`` lists every candidate plaintext.
"""

import random
import re
from typing import List, Tuple

from .engine import CipherStrategy, register_cipher
from .errors import InvalidKey
from .ring import MODULUS, RingElement
from .text import Ciphertext, Message

_DECIMAL = re.compile(r"([+-]?)([0-9]+)")


class Key:
    """
    A Shift Cipher key, a single element of Z/26Z.

    Keys are secret material: they cannot be copied, and ``repr``/``str``
    never show the value. Use ``insecure_export`` to get at it explicitly.
    """

    __slots__ = ("_element",)

    def __init__(self, element: RingElement):
        object.__setattr__(self, "_element", element)

    def __setattr__(self, name, value):
        raise AttributeError("Key is immutable")

    @classmethod
    def from_ring_element(cls, element: RingElement) -> "Key":
        return cls(element)

    @classmethod
    def random(cls, rng: random.Random) -> "Key":
        """
        Generate a key uniformly at random from the whole key space.

        0 is a valid key; it makes encryption the identity.
        """
        return cls(RingElement.random(rng))

    @classmethod
    def parse(cls, text: str) -> "Key":
        """
        Parse a base-10 integer in ``[0, 25]``.

        Out-of-range values such as ``"26"`` or ``"-1"`` are rejected, not
        reduced mod 26, so a mistyped key is reported instead of silently
        wrapping around.
        """
        match = _DECIMAL.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidKey(text)
        sign, digits = match.groups()
        digits = digits.lstrip("0") or "0"
        # Anything longer than two significant digits is out of range.
        if len(digits) > 2:
            raise InvalidKey(text)
        n = int(sign + digits)
        if not 0 <= n < MODULUS:
            raise InvalidKey(text)
        return cls(RingElement.from_canonicalized(n))

    @property
    def element(self) -> RingElement:
        return self._element

    def insecure_export(self) -> str:
        """The key as a decimal string. Do not log or persist it carelessly."""
        return str(self._element.value)

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self._element == other._element

    __hash__ = None

    def __repr__(self) -> str:
        return "Key(<redacted>)"

    __str__ = __repr__

    def __copy__(self):
        raise TypeError("Keys are secret material and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Keys are secret material and cannot be copied")

    def __reduce__(self):
        raise TypeError("Keys are secret material and cannot be pickled")


# ==========================================
#  SHIFT CIPHER
# ==========================================

@register_cipher
class ShiftCipher(CipherStrategy):
    name = "shift"
    description = "Latin Shift Cipher over a-z (key 0-25). Insecure: only 26 keys."

    message_type = Message
    ciphertext_type = Ciphertext
    key_type = Key

    def generate_key(self, rng: random.Random) -> Key:
        return Key.random(rng)

    def encrypt(self, message: Message, key: Key) -> Ciphertext:
        self._check_types(message, Message, "message", "encrypt")
        self._check_types(key, Key, "key", "encrypt")
        k = key.element
        return Ciphertext(m + k for m in message)

    def decrypt(self, ciphertext: Ciphertext, key: Key) -> Message:
        """
        Subtract the key from every letter.

        A wrong key is not an error: it yields some other message. Since the
        cipher is a translation, letter patterns survive, e.g. ``"mom"``
        under key 3 decrypts with key 9 to ``"gig"``.
        """
        self._check_types(ciphertext, Ciphertext, "ciphertext", "decrypt")
        self._check_types(key, Key, "key", "decrypt")
        k = key.element
        return Message(c - k for c in ciphertext)

    def insecure_key_export(self, key: Key) -> str:
        self._check_types(key, Key, "key", "insecure_key_export")
        return key.insecure_export()

    def brute_force(self, ciphertext: Ciphertext) -> List[Tuple[Key, Message]]:
        """Decrypt under every key in the key space, in key order."""
        candidates = []
        for n in range(MODULUS):
            key = Key.from_ring_element(RingElement.from_canonicalized(n))
            candidates.append((key, self.decrypt(ciphertext, key)))
        return candidates


_SHIFT = ShiftCipher()

def encrypt(message: Message, key: Key) -> Ciphertext:
    return _SHIFT.encrypt(message, key)

def decrypt(ciphertext: Ciphertext, key: Key) -> Message:
    return _SHIFT.decrypt(ciphertext, key)

def brute_force(ciphertext: Ciphertext) -> List[Tuple[Key, Message]]:
    return _SHIFT.brute_force(ciphertext)
