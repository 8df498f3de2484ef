"""
The ring of integers modulo 26 and its encoding of the Latin alphabet.

The ring is both the plaintext space and the ciphertext space of the
classical ciphers: letter ``a`` is 0, ``z`` is 25, and shifting a letter is
addition in the ring.
"""

import random
from typing import Dict, Tuple

from .errors import RingElementEncodingError

# Letter -> residue. Must be a bijection onto range(MODULUS).
ALPHABET_ENCODING: Tuple[Tuple[str, int], ...] = tuple(
    (chr(ord('a') + i), i) for i in range(26)
)

# The modulus is the alphabet size, so a different alphabet only needs a new table.
MODULUS = len(ALPHABET_ENCODING)

_CHAR_TO_VALUE: Dict[str, int] = {c: v for c, v in ALPHABET_ENCODING}
_VALUE_TO_CHAR: Dict[int, str] = {v: c for c, v in ALPHABET_ENCODING}


class RingElement:
    """
    An element of Z/26Z.

    ``RingElement(v)`` stores ``v`` as given and is meant for library
    internals only. Values from outside the library must come through
    ``from_char``, ``from_canonicalized`` or ``random``, which always produce
    a canonical residue in ``[0, MODULUS)``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int):
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("RingElement is immutable")

    @property
    def value(self) -> int:
        return self._value

    # ------------------------------------------
    #  Constructors
    # ------------------------------------------

    @classmethod
    def zero(cls) -> "RingElement":
        """The additive identity."""
        return cls(0)

    @classmethod
    def from_canonicalized(cls, n: int) -> "RingElement":
        """Reduce any integer to its least nonnegative residue."""
        # Python's % with a positive modulus is already the Euclidean remainder.
        return cls(n % MODULUS)

    @classmethod
    def from_char(cls, c: str) -> "RingElement":
        """
        Encode a single lowercase Latin letter.

        Raises RingElementEncodingError for anything outside ``a``-``z``,
        including uppercase letters, digits, whitespace and punctuation.
        """
        try:
            return cls(_CHAR_TO_VALUE[c])
        except (KeyError, TypeError):
            raise RingElementEncodingError([c]) from None

    @classmethod
    def random(cls, rng: random.Random) -> "RingElement":
        """
        Draw an element uniformly at random from ``rng``.

        ``randrange`` is exactly uniform over the 26 outcomes. Reducing a
        random byte mod 26 is not: 256 = 9*26 + 22, so residues 0-21 would
        be favoured.
        """
        return cls(rng.randrange(MODULUS))

    # ------------------------------------------
    #  Encoding
    # ------------------------------------------

    def to_char(self) -> str:
        """
        Decode to a lowercase letter.

        Only fails if the element was built unchecked with a value outside
        the ring, which is a bug in the library, not bad input.
        """
        try:
            return _VALUE_TO_CHAR[self._value]
        except KeyError:
            raise AssertionError(
                f"Could not map {self._value!r} to a letter: the alphabet encoding "
                f"is inconsistent or an invalid RingElement was constructed."
            ) from None

    # ------------------------------------------
    #  Arithmetic
    # ------------------------------------------

    def is_zero(self) -> bool:
        return self._value == 0

    def add(self, other: "RingElement") -> "RingElement":
        # Unchecked: both operands canonical means the sum is below 2 * MODULUS.
        total = self._value + other._value
        if total >= MODULUS:
            total -= MODULUS
        return RingElement(total)

    def sub(self, other: "RingElement") -> "RingElement":
        # Unchecked: both operands canonical means the difference is above -MODULUS.
        diff = self._value - other._value
        if diff < 0:
            diff += MODULUS
        return RingElement(diff)

    def __add__(self, other):
        if not isinstance(other, RingElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, RingElement):
            return NotImplemented
        return self.sub(other)

    # ------------------------------------------
    #  Comparison & display
    # ------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, RingElement):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, RingElement):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, RingElement):
            return NotImplemented
        return self._value <= other._value

    def __hash__(self):
        return hash((RingElement, self._value))

    def __repr__(self) -> str:
        return f"RingElement({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self
