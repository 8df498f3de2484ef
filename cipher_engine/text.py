"""
Plaintexts and ciphertexts as sequences of ring elements.

``Message`` and ``Ciphertext`` share a representation but are distinct types:
they never compare equal to each other and there is no conversion between
them, so a caller cannot decrypt a message or encrypt a ciphertext by
accident.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Tuple

from .errors import InvalidCiphertext, InvalidMessage, RingElementEncodingError
from .ring import RingElement


def _encode(text: str) -> Tuple[RingElement, ...]:
    """Encode every character, collecting all of the invalid ones before failing."""
    elements = []
    invalid = []
    for c in text:
        try:
            elements.append(RingElement.from_char(c))
        except RingElementEncodingError:
            invalid.append(c)
    if invalid:
        raise RingElementEncodingError(invalid)
    return tuple(elements)


class _RingText(ABC):
    """Immutable ordered sequence of ring elements."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[RingElement] = ()):
        object.__setattr__(self, "_elements", tuple(elements))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def elements(self) -> Tuple[RingElement, ...]:
        return self._elements

    def _letters(self) -> str:
        return "".join(e.to_char() for e in self._elements)

    def __iter__(self) -> Iterator[RingElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self):
        return hash((type(self), self._elements))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"

    @abstractmethod
    def render(self) -> str:
        pass


class Message(_RingText):
    """A plaintext of arbitrary length over lowercase a-z."""

    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> "Message":
        """
        Parse a string of lowercase Latin letters.

        The empty string is a valid (empty) message. Anything else outside
        ``a``-``z`` raises InvalidMessage naming the offending characters.
        """
        try:
            return cls(_encode(text))
        except RingElementEncodingError as e:
            raise InvalidMessage(e) from e

    def render(self) -> str:
        return self._letters()


class Ciphertext(_RingText):
    """
    A ciphertext of arbitrary length.

    Parsing ignores case; rendering is always uppercase.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> "Ciphertext":
        try:
            return cls(_encode(text.lower()))
        except RingElementEncodingError as e:
            raise InvalidCiphertext(e) from e

    def render(self) -> str:
        return self._letters().upper()
