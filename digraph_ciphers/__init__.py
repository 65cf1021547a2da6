"""
Classical digraph ciphers: Playfair, Two-Square and Four-Square.

None of these ciphers protect anything of value; they are historical and
break in moments. Input is uppercased and anything outside the 25-letter
alphabet is dropped, with J merged into I:

    >>> from digraph_ciphers import PlayfairEngine
    >>> PlayfairEngine("playfair example").encrypt("hide the gold in the tree stump")
    'BMODZBXDNABEKUDMUIXMMOUVIF'
"""

from digraph_ciphers.core.exceptions import CharNotInKeyError, CipherError
from digraph_ciphers.services.engines.base import CipherEngine, CryptMode
from digraph_ciphers.services.engines.digraphs import Digraph, DigraphSplitter
from digraph_ciphers.services.engines.key_square import Coordinate, KeySquare
from digraph_ciphers.services.engines.polygraphic import (
    FourSquareEngine,
    PlayfairEngine,
    TwoSquareEngine,
)
from digraph_ciphers.services.preprocessing.normalizer import (
    NO_Q_ALPHABET,
    STANDARD_ALPHABET,
    ReducedAlphabet,
    TextNormalizer,
)

__all__ = [
    "CharNotInKeyError",
    "CipherEngine",
    "CipherError",
    "Coordinate",
    "CryptMode",
    "Digraph",
    "DigraphSplitter",
    "FourSquareEngine",
    "KeySquare",
    "NO_Q_ALPHABET",
    "PlayfairEngine",
    "ReducedAlphabet",
    "STANDARD_ALPHABET",
    "TextNormalizer",
    "TwoSquareEngine",
]
