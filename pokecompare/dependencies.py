from fastapi import Depends, Request

from pokecompare.clients import PokeAPIClient
from pokecompare.services import CollectionStore, PokemonService


# Collaborators are owned by the application (see create_app) and live on app.state,
# so tests can build an app around their own client and store.
def get_poke_client(request: Request) -> PokeAPIClient:
    return request.app.state.poke_client


def get_collection_store(request: Request) -> CollectionStore:
    return request.app.state.collection_store


def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
) -> PokemonService:
    return PokemonService(poke_client=poke_client)
