from fastapi import APIRouter

from digraph_ciphers.api.v1.endpoints import decrypt, encrypt, squares

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    squares.router,
    prefix="/squares",
    tags=["Key Squares"],
)
