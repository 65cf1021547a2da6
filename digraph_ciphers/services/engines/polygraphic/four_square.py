import logging
from typing import Any

from digraph_ciphers.models.schemas import CipherType
from digraph_ciphers.services.engines.base import CipherEngine, CryptMode, parse_two_keywords
from digraph_ciphers.services.engines.digraphs import Digraph
from digraph_ciphers.services.engines.key_square import KeySquare
from digraph_ciphers.services.engines.registry import EngineRegistry
from digraph_ciphers.services.preprocessing.normalizer import STANDARD_ALPHABET, ReducedAlphabet

logger = logging.getLogger(__name__)


@EngineRegistry.register
class FourSquareEngine(CipherEngine):
    """
    Four-Square cipher engine.

    The Four-Square cipher uses four 5x5 key squares arranged in a 2x2 grid:

        Plaintext 1  |  Ciphertext 1
        ─────────────┼───────────────
        Ciphertext 2 |  Plaintext 2

    The plaintext squares (top-left, bottom-right) use standard alphabet.
    The ciphertext squares (top-right, bottom-left) are keyed.

    Encryption:
    1. Find first plaintext letter in top-left square
    2. Find second plaintext letter in bottom-right square
    3. Form a rectangle and read corners from keyed squares

    Decryption runs the same rectangle from the keyed squares back to the
    plaintext squares.
    """

    name = "Four-Square Cipher"
    cipher_type = CipherType.FOUR_SQUARE
    description = (
        "A digraph substitution cipher using four 5x5 key squares. "
        "Two squares contain the standard alphabet, two contain keyed alphabets. "
        "Pairs of letters are encrypted by forming rectangles between squares."
    )

    def __init__(
        self,
        keyword1: str,
        keyword2: str,
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ):
        super().__init__(alphabet)
        # Top-left and bottom-right hold the same plain alphabet
        self.plain = KeySquare.standard(alphabet)
        self.keyed1 = KeySquare(keyword1, alphabet)  # top-right
        self.keyed2 = KeySquare(keyword2, alphabet)  # bottom-left
        logger.debug("Built Four-Square squares")

    @classmethod
    def from_key(
        cls,
        key: str | dict[str, Any],
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ) -> "FourSquareEngine":
        """Build the engine from "key1,key2" or a {"key1": ..., "key2": ...} dict."""
        key1, key2 = cls._parse_key(key)
        return cls(key1, key2, alphabet)

    @property
    def key(self) -> dict[str, str]:
        return {"key1": self.keyed1.keyword, "key2": self.keyed2.keyword}

    @property
    def squares(self) -> dict[str, KeySquare]:
        return {
            "top_left": self.plain,
            "top_right": self.keyed1,
            "bottom_left": self.keyed2,
            "bottom_right": self.plain,
        }

    @classmethod
    def generate_random_key(cls) -> dict[str, str]:
        """Generate random keywords for both keyed squares."""
        return {"key1": cls._random_keyword(), "key2": cls._random_keyword()}

    def transform_digraph(self, digraph: Digraph, mode: CryptMode) -> Digraph:
        """Form the rectangle between the plain and keyed squares."""
        if mode == CryptMode.ENCRYPT:
            source1, source2 = self.plain, self.plain
            target1, target2 = self.keyed1, self.keyed2
        else:
            source1, source2 = self.keyed1, self.keyed2
            target1, target2 = self.plain, self.plain

        row1, col1 = source1.locate(digraph.first)
        row2, col2 = source2.locate(digraph.second)

        # Same row as the first letter, same column as the second, and vice versa
        return Digraph(
            target1.letter_at(row1, col2),
            target2.letter_at(row2, col1),
        )

    def explain(self) -> str:
        """Generate human-readable explanation."""
        key1, key2 = self.keyed1.keyword, self.keyed2.keyword

        return (
            f"Four-Square cipher with keywords '{key1}' and '{key2}'. "
            f"Uses four 5x5 squares: two standard (top-left, bottom-right) "
            f"and two keyed (top-right from '{key1}', bottom-left from '{key2}'). "
            f"Digraphs are encrypted by forming rectangles between squares."
        )

    @classmethod
    def _parse_key(cls, key: str | dict[str, Any]) -> tuple[str, str]:
        """Parse key to two keyword strings."""
        return parse_two_keywords(key, cls.name)
