"""Tests for Playfair cipher engine."""

import pytest

from digraph_ciphers.core.exceptions import CharNotInKeyError, InvalidKeyError
from digraph_ciphers.services.engines.base import CryptMode
from digraph_ciphers.services.engines.digraphs import Digraph, DigraphSplitter
from digraph_ciphers.services.engines.polygraphic.playfair import PlayfairEngine
from digraph_ciphers.services.preprocessing.normalizer import NO_Q_ALPHABET, TextNormalizer


class TestPlayfairEngine:
    """Test suite for Playfair cipher engine."""

    @pytest.fixture
    def engine(self):
        return PlayfairEngine("playfair example")

    @pytest.fixture
    def sample_plaintext(self):
        return "hide the gold in the tree stump"

    def test_encrypt_known_example(self, engine, sample_plaintext):
        """Test the classic Wikipedia example."""
        assert engine.encrypt(sample_plaintext) == "BMODZBXDNABEKUDMUIXMMOUVIF"

    def test_decrypt_known_example(self, engine):
        """Decryption keeps the inserted padding."""
        assert engine.decrypt("BMODZBXDNABEKUDMUIXMMOUVIF") == "HIDETHEGOLDINTHETREXESTUMP"

    def test_encrypt_rust_rules(self):
        engine = PlayfairEngine("rust rules")
        assert engine.encrypt("cratesio") == "ETCUBRHP"

    def test_decrypt_rust_rules(self):
        """Spaces in the keyword do not change the square."""
        engine = PlayfairEngine("rustrules")
        assert engine.decrypt("ETCUBRHP") == "CRATESIO"

    def test_encrypt_single_letter(self):
        """A single letter is padded to a digraph."""
        assert PlayfairEngine("secret").encrypt("a") == "DV"

    def test_rectangle_rule(self, engine):
        """Letters in different rows and columns swap columns."""
        assert engine.transform_digraph(Digraph("H", "I"), CryptMode.ENCRYPT) == ("B", "M")
        assert engine.transform_digraph(Digraph("B", "M"), CryptMode.DECRYPT) == ("H", "I")

    def test_column_rule(self, engine):
        """Letters in one column move down, wrapping to the top."""
        assert engine.transform_digraph(Digraph("D", "E"), CryptMode.ENCRYPT) == ("O", "D")
        assert engine.transform_digraph(Digraph("O", "D"), CryptMode.DECRYPT) == ("D", "E")
        assert engine.transform_digraph(Digraph("A", "V"), CryptMode.ENCRYPT) == ("E", "A")
        assert engine.transform_digraph(Digraph("E", "A"), CryptMode.DECRYPT) == ("A", "V")

    def test_row_rule(self, engine):
        """Letters in one row move right, wrapping to the left edge."""
        assert engine.transform_digraph(Digraph("E", "X"), CryptMode.ENCRYPT) == ("X", "M")
        assert engine.transform_digraph(Digraph("X", "M"), CryptMode.DECRYPT) == ("E", "X")
        assert engine.transform_digraph(Digraph("I", "M"), CryptMode.ENCRYPT) == ("R", "I")
        assert engine.transform_digraph(Digraph("R", "I"), CryptMode.DECRYPT) == ("I", "M")

    @pytest.mark.parametrize(
        "plaintext",
        [
            "HELLOWORLD",
            "BALLOON",
            "XXX marks the spot",
            "I would like 4 tins of jam.",
            "a",
            "",
        ],
    )
    def test_encrypt_decrypt_roundtrip(self, engine, plaintext):
        """Decrypting gives back the normalized and padded plaintext."""
        letters = TextNormalizer().normalize(plaintext)
        padded = "".join(str(d) for d in DigraphSplitter().split(letters))

        ciphertext = engine.encrypt(plaintext)

        assert len(ciphertext) % 2 == 0
        assert ciphertext.isupper() or ciphertext == ""
        assert engine.decrypt(ciphertext) == padded

    def test_punctuation_only(self, engine):
        """Text without letters encrypts to nothing."""
        assert engine.encrypt("4, 8, 15!") == ""

    def test_merged_letter_not_in_key(self, engine):
        """A J that bypasses normalization cannot be looked up."""
        with pytest.raises(CharNotInKeyError):
            engine.transform_digraph(Digraph("J", "A"), CryptMode.ENCRYPT)

    def test_engine_is_reusable(self, engine, sample_plaintext):
        """Repeated calls on one engine give the same result."""
        first = engine.encrypt(sample_plaintext)
        engine.decrypt(first)
        assert engine.encrypt(sample_plaintext) == first

    def test_drop_q_alphabet_roundtrip(self):
        """The drop-Q alphabet keeps J and removes Q."""
        engine = PlayfairEngine("jumping", NO_Q_ALPHABET)

        ciphertext = engine.encrypt("quick jazz")

        assert "Q" not in ciphertext
        assert engine.decrypt(ciphertext) == "UICKJAZXZX"

    def test_from_key(self):
        """Keys may be strings or dicts."""
        assert PlayfairEngine.from_key("secret").key == "secret"
        assert PlayfairEngine.from_key({"key": "secret"}).key == "secret"
        assert PlayfairEngine.from_key({"keyword": "secret"}).key == "secret"

        with pytest.raises(InvalidKeyError):
            PlayfairEngine.from_key({"key": 42})

    def test_generate_random_key(self):
        """Random keys are valid keywords."""
        for _ in range(50):
            key = PlayfairEngine.generate_random_key()
            assert 5 <= len(key) <= 10
            assert PlayfairEngine.validate_key(key)

    def test_validate_key(self):
        assert PlayfairEngine.validate_key("playfair example") is True
        assert PlayfairEngine.validate_key({"key": "secret"}) is True
        assert PlayfairEngine.validate_key("s3cret") is False
        assert PlayfairEngine.validate_key(["secret"]) is False

    def test_squares(self, engine):
        assert list(engine.squares) == ["key"]
        assert engine.squares["key"].rows[0] == "PLAYF"

    def test_explain(self, engine):
        """Test explanation generation."""
        explanation = engine.explain()

        assert "playfair example" in explanation
        assert "P L A Y F" in explanation
