"""Service layer: Pokemon lookups and the in-memory collections."""
from .collection_store import CollectionStore
from .pokemon_service import PokemonService

__all__ = [
    'CollectionStore',
    'PokemonService',
]
