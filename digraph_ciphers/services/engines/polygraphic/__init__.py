"""Polygraphic cipher engines."""

from digraph_ciphers.services.engines.polygraphic.playfair import PlayfairEngine
from digraph_ciphers.services.engines.polygraphic.two_square import TwoSquareEngine
from digraph_ciphers.services.engines.polygraphic.four_square import FourSquareEngine

__all__ = [
    "PlayfairEngine",
    "TwoSquareEngine",
    "FourSquareEngine",
]
