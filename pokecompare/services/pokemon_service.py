import logging

from pokecompare.clients.pokeapi_client import PokeAPIClient
from pokecompare.errors import PokemonNotFound, UpstreamError
from pokecompare.models import AbilitiesResponse, PokemonRecord, StatsResponse, TypesResponse
from pokecompare.normalizer import normalize

logger = logging.getLogger(__name__)


class PokemonService:
    # Service receives the upstream client via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def _lookup(self, identifier: str | int) -> PokemonRecord:
        """
        One fetch + normalize. Every internal failure kind is collapsed into
        PokemonNotFound; the kind itself only survives in the logs and on `reason`.
        """
        try:
            raw = await self._poke_client.fetch(identifier)
            return normalize(raw)
        except UpstreamError as e:
            reason = type(e).__name__
            logger.warning(f"Lookup for '{identifier}' failed ({reason}): {e.detail}")
            raise PokemonNotFound(identifier, reason=reason) from e

    async def get_full(self, identifier: str | int) -> PokemonRecord:
        return await self._lookup(identifier)

    # Projections reuse the single lookup so they always agree with get_full
    async def get_stats(self, identifier: str | int) -> StatsResponse:
        record = await self._lookup(identifier)
        return StatsResponse(stats=record.stats)

    async def get_types(self, identifier: str | int) -> TypesResponse:
        record = await self._lookup(identifier)
        return TypesResponse(types=record.types)

    async def get_abilities(self, identifier: str | int) -> AbilitiesResponse:
        record = await self._lookup(identifier)
        return AbilitiesResponse(abilities=record.abilities)

