from fastapi import APIRouter, HTTPException, Query, status

from digraph_ciphers.core.exceptions import EngineNotFoundError, InvalidKeyError
from digraph_ciphers.dependencies import AlphabetDep, RegistryDep
from digraph_ciphers.models.schemas import CipherType, ErrorResponse, KeySquaresResponse, SquareView

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherType],
    summary="List cipher types",
    description="List the digraph ciphers that key squares can be built for.",
)
async def list_cipher_types(registry: RegistryDep) -> list[CipherType]:
    """List registered cipher types."""
    return registry.list_registered()


@router.get(
    "/{cipher_type}",
    response_model=KeySquaresResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Show key squares",
    description=(
        "Build the 5x5 squares for a cipher and key. "
        "Two-keyword ciphers take the keywords separated by a comma."
    ),
)
async def get_key_squares(
    cipher_type: CipherType,
    registry: RegistryDep,
    alphabet: AlphabetDep,
    key: str = Query(..., description="Keyword, or 'key1,key2' for two-square ciphers"),
) -> KeySquaresResponse:
    """Show the squares an engine builds from the given key."""
    try:
        engine = registry.create(cipher_type, key, alphabet)
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except InvalidKeyError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    return KeySquaresResponse(
        cipher_type=cipher_type,
        key_used=engine.key,
        squares=[
            SquareView(name=name, rows=list(square.rows))
            for name, square in engine.squares.items()
        ],
    )
