import json
import logging
import re
from typing import Optional
from urllib.parse import quote

import httpx
import redis.asyncio as aioredis
from redis.exceptions import RedisError

from pokecompare.config import DEFAULT_POKEAPI_BASE_URL
from pokecompare.errors import UpstreamNotFound, UpstreamUnavailable

logger = logging.getLogger(__name__)

# ASCII digits only; str.isdigit() also accepts superscripts int() cannot parse
NUMERIC_ID = re.compile(r"-?[0-9]+")


def normalize_identifier(identifier: str | int) -> str:
    """Turns a numeric id or a name into the path segment PokeAPI expects."""
    if isinstance(identifier, bool):
        raise UpstreamNotFound(identifier, "Identifier must be a positive integer or a name.")
    if isinstance(identifier, int):
        if identifier <= 0:
            raise UpstreamNotFound(identifier, f"Invalid Pokemon id {identifier}.")
        return str(identifier)

    slug = str(identifier).strip().lower()
    if not slug:
        raise UpstreamNotFound(identifier, "Empty Pokemon identifier.")
    if NUMERIC_ID.fullmatch(slug) and int(slug) <= 0:
        raise UpstreamNotFound(identifier, f"Invalid Pokemon id {slug}.")
    return slug


class PokeAPIClient:
    CACHE_TTL = 3600  # 1 hour

    def __init__(
        self,
        base_url: str = DEFAULT_POKEAPI_BASE_URL,
        timeout: float = 5.0,
        redis_url: Optional[str] = None,
        cache_ttl: int = CACHE_TTL,
    ):
        self.base_url = base_url
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self.cache_ttl = cache_ttl
        # Caching is optional: without a Redis URL every fetch goes upstream
        self.redis = aioredis.from_url(redis_url, decode_responses=True) if redis_url else None

    async def fetch(self, identifier: str | int) -> dict:
        """Fetches the raw `/pokemon/{identifier}` payload, using the cache when enabled."""
        slug = normalize_identifier(identifier)
        cache_key = f"pokemon:raw:{slug}"

        if self.redis is not None:
            cached_data = await self._cache_get(cache_key)
            if cached_data:
                logger.info(f"Cache hit for Pokemon: {slug}")
                return json.loads(cached_data)
            logger.info(f"Cache miss for Pokemon: {slug}")

        data = await self._fetch_network(slug)

        # Only successful results get cached
        if self.redis is not None:
            await self._cache_set(cache_key, data)
        return data

    # A broken cache degrades to uncached lookups instead of failing the request
    async def _cache_get(self, cache_key: str) -> Optional[str]:
        try:
            return await self.redis.get(cache_key)
        except RedisError as e:
            logger.warning(f"Cache read failed for {cache_key}: {str(e)}")
            return None

    async def _cache_set(self, cache_key: str, data: dict) -> None:
        try:
            await self.redis.setex(cache_key, self.cache_ttl, json.dumps(data))
        except RedisError as e:
            logger.warning(f"Cache write failed for {cache_key}: {str(e)}")

    async def _fetch_network(self, slug: str) -> dict:
        """Performs the GET and maps every failure to an internal upstream error."""
        try:
            response = await self.client.get(f"/pokemon/{quote(slug, safe='')}")
            response.raise_for_status()
            data = response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.info(f"PokeAPI has no Pokemon '{slug}'")
                raise UpstreamNotFound(slug, f"Pokemon '{slug}' not found upstream.")
            detail = f"PokeAPI failed with status {e.response.status_code}"
            logger.error(f"PokeAPI error: {detail}")
            raise UpstreamUnavailable(slug, detail)

        except httpx.RequestError as e:
            # Network failures and timeouts
            logger.error(f"PokeAPI network error: {str(e)}")
            raise UpstreamUnavailable(slug, f"PokeAPI network error: {str(e)}")

        except ValueError:
            logger.error("PokeAPI response parsing error.")
            raise UpstreamUnavailable(slug, "PokeAPI returned a body that is not valid JSON.")

        if not isinstance(data, dict):
            raise UpstreamUnavailable(slug, "PokeAPI returned an unexpected response format.")
        return data

    async def clear_cache(self):
        """Clear the cached upstream payloads. Useful for testing."""
        if self.redis is None:
            return
        keys = await self.redis.keys("pokemon:raw:*")
        if keys:
            await self.redis.delete(*keys)

    async def close(self):
        """Close the HTTP client and the Redis connection (called on app shutdown)."""
        await self.client.aclose()
        if self.redis is not None:
            await self.redis.aclose()
