from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherType(str, Enum):
    """Supported digraph cipher types."""

    PLAYFAIR = "playfair"
    TWO_SQUARE = "two_square"
    FOUR_SQUARE = "four_square"


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1)
    cipher_type: CipherType
    key: str | dict[str, Any] | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1)
    cipher_type: CipherType
    key: str | dict[str, Any]


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str | dict[str, Any]


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: str | dict[str, Any]
    explanation: str


class SquareView(BaseModel):
    """A single 5x5 square, one string per row."""

    name: str
    rows: list[str]


class KeySquaresResponse(BaseModel):
    """Response schema for /squares/{cipher_type} endpoint."""

    cipher_type: CipherType
    key_used: str | dict[str, Any]
    squares: list[SquareView]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
