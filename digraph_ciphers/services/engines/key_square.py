from types import MappingProxyType
from typing import ClassVar, NamedTuple

from digraph_ciphers.core.exceptions import CharNotInKeyError
from digraph_ciphers.services.preprocessing.normalizer import (
    STANDARD_ALPHABET,
    ReducedAlphabet,
    TextNormalizer,
)


class Coordinate(NamedTuple):
    """Position of a letter in a key square, both values in 0..4."""

    row: int
    col: int


class KeySquare:
    """
    A 5x5 key square built from a keyword.

    The keyword is normalized, deduplicated in first-occurrence order and
    followed by the unused letters of the reduced alphabet:

        keyword "PLAYFAIR EXAMPLE"

        P L A Y F
        I R E X M
        B C D G H
        K N O Q S
        T U V W Z

    Every letter of the reduced alphabet appears exactly once. The square
    is immutable once built.
    """

    SIZE: ClassVar[int] = 5

    def __init__(self, keyword: str = "", alphabet: ReducedAlphabet = STANDARD_ALPHABET):
        self._keyword = keyword
        self._alphabet = alphabet

        seen: set[str] = set()
        letters = []
        for char in TextNormalizer(alphabet).normalize(keyword) + alphabet.letters:
            if char not in seen:
                seen.add(char)
                letters.append(char)

        self._letters = "".join(letters)
        self._positions = MappingProxyType({
            char: Coordinate(*divmod(index, self.SIZE))
            for index, char in enumerate(self._letters)
        })

    @classmethod
    def standard(cls, alphabet: ReducedAlphabet = STANDARD_ALPHABET) -> "KeySquare":
        """Square holding the plain alphabet in natural order."""
        return cls("", alphabet)

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def alphabet(self) -> ReducedAlphabet:
        return self._alphabet

    @property
    def letters(self) -> str:
        """All 25 letters in row-major order."""
        return self._letters

    @property
    def rows(self) -> tuple[str, ...]:
        return tuple(
            self._letters[i:i + self.SIZE]
            for i in range(0, len(self._letters), self.SIZE)
        )

    def locate(self, letter: str) -> Coordinate:
        """
        Find the row and column of a letter.

        The letter is uppercased but not merged, so the omitted letter is
        reported as missing.

        Raises:
            CharNotInKeyError: If the letter is not part of the square
        """
        try:
            return self._positions[letter.upper()]
        except KeyError:
            raise CharNotInKeyError(letter, self._letters) from None

    def letter_at(self, row: int | Coordinate, col: int | None = None) -> str:
        """Letter at a coordinate, or at `row`, `col`."""
        if col is None:
            row, col = row
        return self._letters[row * self.SIZE + col]

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and letter.upper() in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeySquare):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)

    def __repr__(self) -> str:
        return f"KeySquare(keyword={self._keyword!r}, letters={self._letters!r})"
