import logging

from fastapi import APIRouter, HTTPException, status

from digraph_ciphers.core.exceptions import CharNotInKeyError, EngineNotFoundError, InvalidKeyError
from digraph_ciphers.dependencies import AlphabetDep, RegistryDep, SettingsDep
from digraph_ciphers.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description=(
        "Encrypt plaintext using a specified digraph cipher. "
        "A random key is generated when none is given."
    ),
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
    alphabet: AlphabetDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Non-letters are dropped and J is merged into I before encryption, so
    the ciphertext is always uppercase and of even length.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
        )

    engine_class = registry.get_engine_class(request.cipher_type)
    if engine_class is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Cipher type '{request.cipher_type.value}' is not supported",
        )

    # Generate key if not provided
    key = request.key
    if key is None:
        key = engine_class.generate_random_key()

    try:
        engine = registry.create(request.cipher_type, key, alphabet)
        ciphertext = engine.encrypt(request.plaintext)
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except (InvalidKeyError, CharNotInKeyError) as e:
        logger.warning("Encryption rejected: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    logger.info("Encrypted %d chars with %s", len(request.plaintext), engine.name)
    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=engine.key,
    )
