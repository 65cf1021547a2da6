from typing import NamedTuple

from digraph_ciphers.services.preprocessing.normalizer import STANDARD_ALPHABET, ReducedAlphabet


class Digraph(NamedTuple):
    """An ordered pair of letters processed together."""

    first: str
    second: str

    def __str__(self) -> str:
        return self.first + self.second


class DigraphSplitter:
    """
    Splits normalized text into digraphs.

    Plaintext is paired greedily from the left. When the pending pair holds
    the same letter twice, the padding letter is inserted after the first
    one and the scan advances by a single position:

        "BALLOON" -> BA LX LO ON

    An unpaired final letter is padded the same way. A padding letter that
    is itself doubled gets the alternate padding, so "XX" becomes XQ XQ.
    """

    def __init__(self, alphabet: ReducedAlphabet = STANDARD_ALPHABET):
        self.alphabet = alphabet

    def split(self, letters: str) -> list[Digraph]:
        """Pair plaintext letters, breaking doubled letters with padding."""
        digraphs = []
        i = 0
        while i < len(letters):
            first = letters[i]
            if i + 1 < len(letters) and letters[i + 1] != first:
                digraphs.append(Digraph(first, letters[i + 1]))
                i += 2
            else:
                digraphs.append(Digraph(first, self.alphabet.padding_for(first)))
                i += 1

        return digraphs

    def chunk(self, letters: str) -> list[Digraph]:
        """Pair ciphertext letters as they come, padding only an odd tail."""
        if len(letters) % 2:
            letters += self.alphabet.padding_for(letters[-1])

        return [Digraph(letters[i], letters[i + 1]) for i in range(0, len(letters), 2)]
