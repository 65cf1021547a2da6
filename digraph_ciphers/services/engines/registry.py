from typing import Any, Type

from digraph_ciphers.core.exceptions import EngineNotFoundError, InvalidKeyError
from digraph_ciphers.models.schemas import CipherType
from digraph_ciphers.services.engines.base import CipherEngine
from digraph_ciphers.services.preprocessing.normalizer import STANDARD_ALPHABET, ReducedAlphabet


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engines and builds keyed instances by type.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class PlayfairEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine] | None:
        """
        Get the engine class for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine class or None if not found
        """
        return self._engines.get(cipher_type)

    def create(
        self,
        cipher_type: CipherType,
        key: str | dict[str, Any],
        alphabet: ReducedAlphabet = STANDARD_ALPHABET,
    ) -> CipherEngine:
        """
        Build a keyed engine for the specified cipher type.

        Args:
            cipher_type: The type of cipher
            key: Key in any shape the engine's from_key() accepts
            alphabet: Reduced alphabet for the squares

        Returns:
            Engine instance

        Raises:
            EngineNotFoundError: If no engine is registered for the type
            InvalidKeyError: If the key has the wrong shape or its keywords
                contain anything but letters and spaces
        """
        engine_class = self.get_engine_class(cipher_type)
        if engine_class is None:
            raise EngineNotFoundError(str(cipher_type.value))

        engine = engine_class.from_key(key, alphabet)
        if not engine_class.validate_key(key):
            raise InvalidKeyError(
                f"{engine_class.name} keywords may contain letters and spaces only",
                {"key": engine.key},
            )

        return engine

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from digraph_ciphers.services.engines.polygraphic import (  # noqa: F401
        four_square,
        playfair,
        two_square,
    )


# Load engines when module is imported
_load_engines()
