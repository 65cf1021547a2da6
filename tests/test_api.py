"""Tests for the HTTP API and its configuration."""

import pytest
from fastapi.testclient import TestClient

from digraph_ciphers.core.config import Settings, get_settings
from digraph_ciphers.dependencies import get_default_alphabet
from digraph_ciphers.main import app
from digraph_ciphers.services.preprocessing.normalizer import NO_Q_ALPHABET, STANDARD_ALPHABET


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestEncryptEndpoint:
    """Test suite for /encrypt."""

    def test_encrypt_playfair(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={
                "plaintext": "hide the gold in the tree stump",
                "cipher_type": "playfair",
                "key": "playfair example",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "BMODZBXDNABEKUDMUIXMMOUVIF"
        assert body["cipher_type"] == "playfair"
        assert body["key_used"] == "playfair example"

    def test_encrypt_two_square_dict_key(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={
                "plaintext": "joe",
                "cipher_type": "two_square",
                "key": {"key1": "EXAMPLE", "key2": "KEYWORD"},
            },
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "NYMT"

    def test_encrypt_generates_key(self, client):
        """A random key is used when none is given."""
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "attack at dawn", "cipher_type": "four_square"},
        )

        assert response.status_code == 200
        body = response.json()
        assert set(body["key_used"]) == {"key1", "key2"}
        assert len(body["ciphertext"]) % 2 == 0

    def test_encrypt_invalid_key(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "joe", "cipher_type": "four_square", "key": "EXAMPLE"},
        )

        assert response.status_code == 400

    def test_encrypt_unknown_cipher(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "joe", "cipher_type": "hill", "key": "EXAMPLE"},
        )

        assert response.status_code == 422

    def test_encrypt_too_long(self, client):
        """The configured maximum length is enforced."""
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=5)

        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "far too long", "cipher_type": "playfair", "key": "secret"},
        )

        assert response.status_code == 400
        assert "maximum length" in response.json()["detail"]

    def test_encrypt_raised_length_limit(self, client):
        """Text longer than the default limit is accepted when the limit is raised."""
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=200_000)

        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "ab" * 75_000, "cipher_type": "playfair", "key": "secret"},
        )

        assert response.status_code == 200
        assert len(response.json()["ciphertext"]) == 150_000

    def test_encrypt_rejects_non_letter_key(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "joe", "cipher_type": "playfair", "key": "s3cret!!"},
        )

        assert response.status_code == 400
        assert "letters and spaces" in response.json()["detail"]


class TestDecryptEndpoint:
    """Test suite for /decrypt."""

    def test_decrypt_four_square(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "DIAZ",
                "cipher_type": "four_square",
                "key": "EXAMPLE,KEYWORD",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["plaintext"] == "IOEX"
        assert body["key_used"] == {"key1": "EXAMPLE", "key2": "KEYWORD"}
        assert "Four-Square" in body["explanation"]

    def test_decrypt_playfair(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "BMODZBXDNABEKUDMUIXMMOUVIF",
                "cipher_type": "playfair",
                "key": {"key": "playfair example"},
            },
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "HIDETHEGOLDINTHETREXESTUMP"

    def test_decrypt_requires_key(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "DIAZ", "cipher_type": "four_square"},
        )

        assert response.status_code == 422

    def test_decrypt_drop_q_alphabet(self, client):
        """The configured alphabet is used for the squares."""
        app.dependency_overrides[get_settings] = lambda: Settings(default_alphabet="drop_q")

        encrypted = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "jazz", "cipher_type": "playfair", "key": "jumping"},
        ).json()["ciphertext"]
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": encrypted, "cipher_type": "playfair", "key": "jumping"},
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "JAZXZX"


class TestSquaresEndpoint:
    """Test suite for /squares."""

    def test_list_cipher_types(self, client):
        response = client.get("/api/v1/squares")

        assert response.status_code == 200
        assert set(response.json()) >= {"playfair", "two_square", "four_square"}

    def test_playfair_square(self, client):
        response = client.get("/api/v1/squares/playfair", params={"key": "playfair example"})

        assert response.status_code == 200
        squares = response.json()["squares"]
        assert squares == [
            {"name": "key", "rows": ["PLAYF", "IREXM", "BCDGH", "KNOQS", "TUVWZ"]},
        ]

    def test_two_square_squares(self, client):
        response = client.get("/api/v1/squares/two_square", params={"key": "EXAMPLE,KEYWORD"})

        assert response.status_code == 200
        squares = {s["name"]: s["rows"] for s in response.json()["squares"]}
        assert squares["top"][0] == "EXAMP"
        assert squares["bottom"][0] == "KEYWO"

    def test_four_square_squares(self, client):
        response = client.get("/api/v1/squares/four_square", params={"key": "EXAMPLE,KEYWORD"})

        assert response.status_code == 200
        names = [s["name"] for s in response.json()["squares"]]
        assert names == ["top_left", "top_right", "bottom_left", "bottom_right"]

    def test_invalid_key(self, client):
        response = client.get("/api/v1/squares/two_square", params={"key": "EXAMPLE"})

        assert response.status_code == 400

    def test_key_required(self, client):
        response = client.get("/api/v1/squares/two_square")

        assert response.status_code == 422

    def test_empty_playfair_key_gives_standard_square(self, client):
        response = client.get("/api/v1/squares/playfair", params={"key": ""})

        assert response.status_code == 200
        assert response.json()["squares"][0]["rows"][0] == "ABCDE"


class TestSettings:
    """Test suite for settings."""

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_TEXT_LENGTH", "50")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.max_text_length == 50
        assert settings.log_level == "DEBUG"

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.default_alphabet == "merge_ij"
        assert settings.is_development

    def test_default_alphabet_dependency(self):
        assert get_default_alphabet(Settings(default_alphabet="merge_ij")) is STANDARD_ALPHABET
        assert get_default_alphabet(Settings(default_alphabet="drop_q")) is NO_Q_ALPHABET
