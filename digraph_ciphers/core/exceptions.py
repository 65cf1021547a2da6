from typing import Any


class CipherError(Exception):
    """Base exception for all digraph cipher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherError):
    """Raised when input validation fails."""

    pass


class InvalidKeyError(ValidationError):
    """Raised when a key cannot be used to build the cipher squares."""

    pass


class EngineError(CipherError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class CharNotInKeyError(EngineError):
    """
    Raised when a letter cannot be located in a key square.

    Only letters of the reduced alphabet live in a square, so this is hit by
    the omitted letter (J for the I/J merge) or any non-letter that reaches
    a lookup without going through the normalizer. Processing stops at the
    first occurrence.
    """

    def __init__(self, char: str, square: str):
        super().__init__(
            f"Only chars A-Z possible - '{char}' was not found in key {square}",
            {"char": char, "square": square},
        )
        self.char = char
        self.square = square
