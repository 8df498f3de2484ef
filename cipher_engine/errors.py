"""
Error types raised when parsing text or keys.

Every parse failure is an ``EncodingError`` (a ``ValueError``), so callers
can re-prompt on the base class without caring which value failed.
"""

from typing import Iterable, List


def _unique_in_order(chars: Iterable[str]) -> List[str]:
    seen = []
    for c in chars:
        if c not in seen:
            seen.append(c)
    return seen


class EncodingError(ValueError):
    """A string violates the format of the value it was parsed as."""


class RingElementEncodingError(EncodingError):
    """
    A character has no entry in the alphabet encoding.

    Raised by ``RingElement.from_char``. Parsers lift it into
    ``InvalidMessage`` or ``InvalidCiphertext``.
    """

    def __init__(self, invalid_chars: Iterable[str]):
        self.invalid_chars = _unique_in_order(invalid_chars)
        shown = ", ".join(repr(c) for c in self.invalid_chars)
        super().__init__(f"Failed to encode the following characters as ring elements: {shown}")


class InvalidMessage(EncodingError):
    """The string contained characters other than lowercase a-z."""

    def __init__(self, cause: RingElementEncodingError):
        self.invalid_chars = cause.invalid_chars
        super().__init__(f"Invalid Message. {cause}")


class InvalidCiphertext(EncodingError):
    """The string contained characters other than Latin letters (any case)."""

    def __init__(self, cause: RingElementEncodingError):
        self.invalid_chars = cause.invalid_chars
        super().__init__(f"Invalid Ciphertext. {cause}")


class InvalidKey(EncodingError):
    """The string is not a decimal integer in the key space."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'Input "{text}" does not represent a valid key')
