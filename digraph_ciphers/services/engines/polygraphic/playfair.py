import logging
from typing import Any

from digraph_ciphers.core.exceptions import InvalidKeyError
from digraph_ciphers.models.schemas import CipherType
from digraph_ciphers.services.engines.base import CipherEngine, CryptMode
from digraph_ciphers.services.engines.digraphs import Digraph
from digraph_ciphers.services.engines.key_square import KeySquare
from digraph_ciphers.services.engines.registry import EngineRegistry
from digraph_ciphers.services.preprocessing.normalizer import STANDARD_ALPHABET, ReducedAlphabet

logger = logging.getLogger(__name__)


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Decryption shifts left and up instead. Double letters are separated by
    an 'X' (e.g., "BALLOON" -> "BA LX LO ON").
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    def __init__(self, keyword: str, alphabet: ReducedAlphabet = STANDARD_ALPHABET):
        super().__init__(alphabet)
        self.square = KeySquare(keyword, alphabet)
        logger.debug("Built Playfair square for %d-letter keyword", len(keyword))

    @classmethod
    def from_key(
        cls,
        key: str | dict[str, Any],
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ) -> "PlayfairEngine":
        """Build the engine from a keyword or a {"key": ...} dict."""
        (keyword,) = cls._parse_key(key)
        return cls(keyword, alphabet)

    @property
    def key(self) -> str:
        return self.square.keyword

    @property
    def squares(self) -> dict[str, KeySquare]:
        return {"key": self.square}

    @classmethod
    def generate_random_key(cls) -> str:
        """Generate a random keyword."""
        return cls._random_keyword()

    def transform_digraph(self, digraph: Digraph, mode: CryptMode) -> Digraph:
        """Apply the row, column or rectangle rule to one digraph."""
        row_a, col_a = self.square.locate(digraph.first)
        row_b, col_b = self.square.locate(digraph.second)
        shift = 1 if mode == CryptMode.ENCRYPT else -1
        size = KeySquare.SIZE

        if row_a == row_b:
            # Same row: shift right (encrypt) or left (decrypt)
            return Digraph(
                self.square.letter_at(row_a, (col_a + shift) % size),
                self.square.letter_at(row_b, (col_b + shift) % size),
            )
        if col_a == col_b:
            # Same column: shift down (encrypt) or up (decrypt)
            return Digraph(
                self.square.letter_at((row_a + shift) % size, col_a),
                self.square.letter_at((row_b + shift) % size, col_b),
            )
        # Rectangle: swap columns
        return Digraph(
            self.square.letter_at(row_a, col_b),
            self.square.letter_at(row_b, col_a),
        )

    def explain(self) -> str:
        """Generate human-readable explanation."""
        return (
            f"Playfair cipher with keyword '{self.key}'. "
            f"5x5 key square:\n{self.square}\n"
            f"Letters are encrypted in pairs using row/column rules."
        )

    @classmethod
    def _parse_key(cls, key: str | dict[str, Any]) -> tuple[str]:
        """Parse key to a single keyword."""
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise InvalidKeyError(
                "Playfair key must be a keyword string",
                {"key_type": type(key).__name__},
            )
        return (key,)
