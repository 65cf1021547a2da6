import logging
import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from digraph_ciphers.core.exceptions import InvalidKeyError
from digraph_ciphers.models.schemas import CipherType
from digraph_ciphers.services.engines.digraphs import Digraph, DigraphSplitter
from digraph_ciphers.services.engines.key_square import KeySquare
from digraph_ciphers.services.preprocessing.normalizer import (
    STANDARD_ALPHABET,
    ReducedAlphabet,
    TextNormalizer,
)

logger = logging.getLogger(__name__)


class CryptMode(str, Enum):
    """Direction of a digraph transformation."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherEngine(ABC):
    """
    Abstract base class for all digraph cipher engines.

    An engine is built once from its key material and holds the key
    squares for the lifetime of the key. Encryption and decryption never
    mutate it, so a single instance can serve any number of callers.

    Each cipher implementation must provide:
    - transform_digraph(): Encrypt or decrypt a single digraph
    - from_key(): Build an engine from an API-style key
    - key: The key in the shape from_key() accepts
    - squares: The named key squares, for display
    - generate_random_key(): Produce a random valid key
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    description: str

    KEY_LETTERS: ClassVar[str] = STANDARD_ALPHABET.letters

    def __init__(self, alphabet: ReducedAlphabet = STANDARD_ALPHABET):
        self.alphabet = alphabet
        self._normalizer = TextNormalizer(alphabet)
        self._splitter = DigraphSplitter(alphabet)

    @abstractmethod
    def transform_digraph(self, digraph: Digraph, mode: CryptMode) -> Digraph:
        """
        Encrypt or decrypt a single digraph.

        Args:
            digraph: The pair of letters to transform
            mode: Direction of the transformation

        Returns:
            The transformed digraph

        Raises:
            CharNotInKeyError: If a letter is missing from its square
        """
        pass

    @classmethod
    @abstractmethod
    def from_key(
        cls,
        key: str | dict[str, Any],
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ) -> "CipherEngine":
        """
        Build an engine from a key.

        Args:
            key: Keyword string, comma separated keywords or a dict
            alphabet: Reduced alphabet for the squares

        Returns:
            Engine holding the key squares

        Raises:
            InvalidKeyError: If the key has the wrong shape
        """
        pass

    @property
    @abstractmethod
    def key(self) -> str | dict[str, str]:
        """The key, in the shape from_key() accepts."""
        pass

    @property
    @abstractmethod
    def squares(self) -> dict[str, KeySquare]:
        """The key squares by position name."""
        pass

    @classmethod
    @abstractmethod
    def generate_random_key(cls) -> str | dict[str, str]:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def explain(self) -> str:
        """
        Generate human-readable explanation of the cipher setup.

        Returns:
            Explanation string
        """
        pass

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt plaintext.

        The text is normalized, doubled letters are split and an odd final
        letter is padded before the digraphs are transformed.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            Uppercase ciphertext of even length

        Raises:
            CharNotInKeyError: If a letter cannot be located
        """
        letters = self._normalizer.normalize(plaintext)
        return self._crypt_payload(self._splitter.split(letters), CryptMode.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt ciphertext.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            Uppercase plaintext, padding included

        Raises:
            CharNotInKeyError: If a letter cannot be located
        """
        letters = self._normalizer.normalize(ciphertext)
        return self._crypt_payload(self._splitter.chunk(letters), CryptMode.DECRYPT)

    @classmethod
    def validate_key(cls, key: str | dict[str, Any]) -> bool:
        """
        Validate that a key is usable for this cipher.

        Keywords may contain letters and spaces only.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        try:
            keywords = cls._parse_key(key)
        except (InvalidKeyError, TypeError):
            return False
        return all(c.isascii() and (c.isalpha() or c == " ") for c in "".join(keywords))

    @classmethod
    @abstractmethod
    def _parse_key(cls, key: str | dict[str, Any]) -> tuple[str, ...]:
        """
        Parse key into its keyword strings.

        Raises:
            InvalidKeyError: If the key has the wrong shape
        """
        pass

    @classmethod
    def _random_keyword(cls) -> str:
        """Generate a random keyword of 5 to 10 letters."""
        length = random.randint(5, 10)
        return "".join(random.choice(cls.KEY_LETTERS) for _ in range(length))

    def _crypt_payload(self, digraphs: list[Digraph], mode: CryptMode) -> str:
        """Transform every digraph and join the results."""
        result = []
        for digraph in digraphs:
            result.extend(self.transform_digraph(digraph, mode))

        logger.debug("%s %s: %d digraphs", self.name, mode.value, len(digraphs))
        return "".join(result)


def parse_two_keywords(key: str | dict[str, Any], cipher_name: str) -> tuple[str, str]:
    """Split a two-keyword key given as a dict or a comma separated string."""
    if isinstance(key, dict):
        key1 = key.get("key1", key.get("keyword1", ""))
        key2 = key.get("key2", key.get("keyword2", ""))
    elif isinstance(key, str):
        parts = key.split(",")
        if len(parts) != 2:
            raise InvalidKeyError(
                f"{cipher_name} needs two keywords separated by a comma",
                {"parts": len(parts)},
            )
        key1, key2 = parts[0].strip(), parts[1].strip()
    else:
        raise InvalidKeyError(
            f"Invalid key format for {cipher_name}",
            {"key_type": type(key).__name__},
        )

    if not isinstance(key1, str) or not isinstance(key2, str):
        raise InvalidKeyError(f"{cipher_name} keywords must be strings")

    return key1, key2
