import string
import unicodedata
from dataclasses import dataclass


@dataclass(frozen=True)
class ReducedAlphabet:
    """
    A 25-letter alphabet that fits a 5x5 square.

    One letter of A-Z is omitted. It is either merged into another letter
    (J -> I, the Playfair convention) or dropped from the text entirely.
    The padding letters are used to split doubled letters and to complete
    an odd final letter.
    """

    name: str
    omitted: str
    merge_into: str | None = None
    padding: str = "X"
    alternate_padding: str = "Q"

    def __post_init__(self) -> None:
        if self.omitted in (self.padding, self.alternate_padding):
            raise ValueError(f"Padding letter cannot be the omitted letter '{self.omitted}'")
        if self.padding == self.alternate_padding:
            raise ValueError("Padding and alternate padding must differ")

    @property
    def letters(self) -> str:
        """The 25 letters in natural order."""
        return string.ascii_uppercase.replace(self.omitted, "")

    def padding_for(self, letter: str) -> str:
        """Padding letter to place after `letter` without creating a doubled pair."""
        return self.alternate_padding if letter == self.padding else self.padding


STANDARD_ALPHABET = ReducedAlphabet(name="merge_ij", omitted="J", merge_into="I")
NO_Q_ALPHABET = ReducedAlphabet(name="drop_q", omitted="Q", alternate_padding="Z")

ALPHABETS: dict[str, ReducedAlphabet] = {
    STANDARD_ALPHABET.name: STANDARD_ALPHABET,
    NO_Q_ALPHABET.name: NO_Q_ALPHABET,
}


def get_alphabet(name: str) -> ReducedAlphabet:
    """Look up a reduced alphabet by name."""
    try:
        return ALPHABETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown alphabet '{name}', expected one of {sorted(ALPHABETS)}"
        ) from None


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    alphabet: ReducedAlphabet
    removed_chars: dict[str, int]


class TextNormalizer:
    """
    Normalizes text for the digraph ciphers.

    Handles:
    - Unicode normalization (NFKC)
    - Case conversion
    - Merging or dropping the omitted letter
    - Non-alphabetic character removal

    Normalization never fails: anything outside the reduced alphabet is
    silently removed.
    """

    def __init__(self, alphabet: ReducedAlphabet = STANDARD_ALPHABET):
        """Initialize normalizer with specified alphabet."""
        self.alphabet = alphabet
        self._allowed = frozenset(alphabet.letters)

    def normalize(self, text: str) -> str:
        """
        Normalize text to letters of the reduced alphabet.

        Args:
            text: Input text to normalize

        Returns:
            Uppercase string containing only reduced-alphabet letters
        """
        return self.normalize_full(text).text

    def normalize_full(self, text: str) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Input text to normalize

        Returns:
            NormalizedText with details about the normalization
        """
        removed_chars: dict[str, int] = {}
        upper = unicodedata.normalize("NFKC", text).upper()

        if self.alphabet.merge_into is not None:
            upper = upper.replace(self.alphabet.omitted, self.alphabet.merge_into)

        return NormalizedText(
            text=self._filter_chars(upper, removed_chars),
            original=text,
            alphabet=self.alphabet,
            removed_chars=removed_chars,
        )

    def _filter_chars(self, text: str, removed_chars: dict[str, int]) -> str:
        """Filter text to only allowed characters, tracking removed ones."""
        result = []

        for char in text:
            if char in self._allowed:
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return "".join(result)
