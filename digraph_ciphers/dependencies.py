from typing import Annotated

from fastapi import Depends

from digraph_ciphers.core.config import Settings, get_settings
from digraph_ciphers.services.engines.registry import EngineRegistry
from digraph_ciphers.services.preprocessing.normalizer import ReducedAlphabet, get_alphabet


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Alphabet dependency
def get_default_alphabet(settings: SettingsDep) -> ReducedAlphabet:
    """Get the configured reduced alphabet."""
    return get_alphabet(settings.default_alphabet)

AlphabetDep = Annotated[ReducedAlphabet, Depends(get_default_alphabet)]


# Registry dependency
def get_registry() -> EngineRegistry:
    """Get the engine registry."""
    return EngineRegistry()

RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]
