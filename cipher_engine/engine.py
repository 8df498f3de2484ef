import random
from abc import ABC, abstractmethod
from typing import Dict, List, Type

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class CipherStrategy(ABC):
    """
    Abstract base class that all ciphers must implement.

    A cipher names its own message, ciphertext and key types. For every key
    ``k`` in the key space, ``decrypt(encrypt(m, k), k) == m`` must hold for
    every message ``m``.
    """

    message_type: Type = None
    ciphertext_type: Type = None
    key_type: Type = None

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def generate_key(self, rng: random.Random):
        """Pick a key uniformly at random from the key space using ``rng``."""
        pass

    @abstractmethod
    def encrypt(self, message, key):
        pass

    @abstractmethod
    def decrypt(self, ciphertext, key):
        pass

    @abstractmethod
    def insecure_key_export(self, key) -> str:
        """Render a key as text. The result is secret material."""
        pass

    def parse_message(self, text: str):
        return self.message_type.parse(text)

    def parse_ciphertext(self, text: str):
        return self.ciphertext_type.parse(text)

    def parse_key(self, text: str):
        return self.key_type.parse(text)

    def _check_types(self, value, expected: Type, role: str, method: str) -> None:
        if not isinstance(value, expected):
            raise TypeError(
                f"{self.name}.{method}() expects a {expected.__name__} as {role}, "
                f"got {type(value).__name__}"
            )


CIPHER_REGISTRY: Dict[str, CipherStrategy] = {}

def register_cipher(cls):
    """Decorator to auto-register ciphers."""
    cipher = cls()
    CIPHER_REGISTRY[cipher.name] = cipher
    return cls

def get_cipher(name: str) -> CipherStrategy:
    try:
        return CIPHER_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown cipher '{name}'. Available: {', '.join(list_cipher_names())}") from None

def list_cipher_names() -> List[str]:
    return sorted(CIPHER_REGISTRY)
