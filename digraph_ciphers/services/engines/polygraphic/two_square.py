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
class TwoSquareEngine(CipherEngine):
    """
    Two-Square cipher engine.

    The Two-Square cipher uses two keyed 5x5 squares stacked vertically:

        E X A M P
        L B C D F      top (keyword 1)
        G H I K N
        O Q R S T
        U V W Y Z

        K E Y W O
        R D A B C      bottom (keyword 2)
        F G H I L
        M N P Q S
        T U V X Z

    The first letter of a digraph is found in the top square, the second in
    the bottom one. The result takes the top letter's row and the bottom
    letter's column from the top square, and the bottom letter's row and the
    top letter's column from the bottom square. Applying the rule to a
    ciphertext digraph gives back the plaintext, so the same rule serves
    both directions.
    """

    name = "Two-Square Cipher"
    cipher_type = CipherType.TWO_SQUARE
    description = (
        "A digraph substitution cipher using two keyed 5x5 squares. "
        "Pairs of letters are encrypted by swapping columns between the squares. "
        "Encryption and decryption are the same operation."
    )

    def __init__(
        self,
        keyword1: str,
        keyword2: str,
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ):
        super().__init__(alphabet)
        self.top = KeySquare(keyword1, alphabet)
        self.bottom = KeySquare(keyword2, alphabet)
        logger.debug("Built Two-Square squares")

    @classmethod
    def from_key(
        cls,
        key: str | dict[str, Any],
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ) -> "TwoSquareEngine":
        """Build the engine from "key1,key2" or a {"key1": ..., "key2": ...} dict."""
        key1, key2 = cls._parse_key(key)
        return cls(key1, key2, alphabet)

    @property
    def key(self) -> dict[str, str]:
        return {"key1": self.top.keyword, "key2": self.bottom.keyword}

    @property
    def squares(self) -> dict[str, KeySquare]:
        return {"top": self.top, "bottom": self.bottom}

    @classmethod
    def generate_random_key(cls) -> dict[str, str]:
        """Generate random keywords for both squares."""
        return {"key1": cls._random_keyword(), "key2": cls._random_keyword()}

    def transform_digraph(self, digraph: Digraph, mode: CryptMode) -> Digraph:
        """Swap columns between the top and bottom squares; mode is ignored."""
        row_a, col_a = self.top.locate(digraph.first)
        row_b, col_b = self.bottom.locate(digraph.second)

        return Digraph(
            self.top.letter_at(row_a, col_b),
            self.bottom.letter_at(row_b, col_a),
        )

    def explain(self) -> str:
        """Generate human-readable explanation."""
        key1, key2 = self.top.keyword, self.bottom.keyword
        return (
            f"Two-Square cipher with keywords '{key1}' and '{key2}'. "
            f"Top square from '{key1}':\n{self.top}\n"
            f"Bottom square from '{key2}':\n{self.bottom}\n"
            f"Each digraph swaps columns between the squares; "
            f"decryption repeats the same rule."
        )

    @classmethod
    def _parse_key(cls, key: str | dict[str, Any]) -> tuple[str, str]:
        """Parse key to two keyword strings."""
        return parse_two_keywords(key, cls.name)
