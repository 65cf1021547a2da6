import logging

from fastapi import APIRouter, HTTPException, status

from digraph_ciphers.core.exceptions import CharNotInKeyError, EngineNotFoundError, InvalidKeyError
from digraph_ciphers.dependencies import AlphabetDep, RegistryDep, SettingsDep
from digraph_ciphers.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified digraph cipher and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    alphabet: AlphabetDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    Padding letters inserted during encryption are kept in the plaintext.
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    try:
        engine = registry.create(request.cipher_type, request.key, alphabet)
        plaintext = engine.decrypt(request.ciphertext)
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except (InvalidKeyError, CharNotInKeyError) as e:
        logger.warning("Decryption rejected: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    logger.info("Decrypted %d chars with %s", len(request.ciphertext), engine.name)
    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        key_used=engine.key,
        explanation=engine.explain(),
    )
