"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient, normalize_identifier

__all__ = [
    'PokeAPIClient',
    'normalize_identifier',
]
