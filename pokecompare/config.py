import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"


@dataclass(frozen=True)
class Settings:
    pokeapi_base_url: str = DEFAULT_POKEAPI_BASE_URL
    upstream_timeout: float = 5.0
    # No Redis URL means no upstream payload cache
    redis_url: Optional[str] = None
    cache_ttl: int = 3600  # 1 hour
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Reads settings from environment variables, falling back to the defaults."""
        return cls(
            pokeapi_base_url=os.getenv("POKEAPI_BASE_URL", DEFAULT_POKEAPI_BASE_URL).rstrip("/"),
            upstream_timeout=float(os.getenv("POKEAPI_TIMEOUT", "5.0")),
            redis_url=os.getenv("REDIS_URL") or None,
            cache_ttl=int(os.getenv("POKEMON_CACHE_TTL", "3600")),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op when the root logger already has handlers (uvicorn, pytest)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
