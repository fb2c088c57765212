import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from pokecompare.clients import PokeAPIClient
from pokecompare.config import Settings, configure_logging
from pokecompare.dependencies import get_collection_store, get_pokemon_service
from pokecompare.errors import PokemonNotFound
from pokecompare.models import (
    AbilitiesResponse,
    CollectionName,
    ComparisonsResponse,
    ErrorResponse,
    FavoritesResponse,
    PokemonRecord,
    StatsResponse,
    TypesResponse,
)
from pokecompare.services import CollectionStore, PokemonService

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse, "description": "Pokemon not found"}}


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CollectionStore] = None,
    poke_client: Optional[PokeAPIClient] = None,
) -> FastAPI:
    """Builds the API around an explicitly owned upstream client and collection store."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if poke_client is None:
        poke_client = PokeAPIClient(
            base_url=settings.pokeapi_base_url,
            timeout=settings.upstream_timeout,
            redis_url=settings.redis_url,
            cache_ttl=settings.cache_ttl,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Serving Pokemon data from {poke_client.base_url}")
        yield
        await poke_client.close()

    app = FastAPI(
        title="Pokemon Compare API",
        description="Looks up Pokemon on PokeAPI and keeps favorites and comparison lists.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.poke_client = poke_client
    app.state.collection_store = store if store is not None else CollectionStore()

    # Preflight requests are answered here, before routing
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    # Every lookup failure leaves the API as the same 404 body
    @app.exception_handler(PokemonNotFound)
    async def pokemon_not_found_handler(request: Request, exc: PokemonNotFound):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    _register_pokemon_routes(app)
    _register_collection_routes(app)
    return app


def _register_pokemon_routes(app: FastAPI) -> None:
    # Endpoint 1: Full Pokemon record
    @app.get(
        "/pokemon/{identifier}",
        response_model=PokemonRecord,
        response_model_exclude_none=True,
        responses=NOT_FOUND_RESPONSES,
        summary="Returns the full Pokemon record",
    )
    async def get_pokemon(
        identifier: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        """Fetches id, name, stats, types, abilities, size and sprites by name or numeric id."""
        return await service.get_full(identifier)

    # Endpoints 2-4: Projections of the same record
    @app.get(
        "/pokemon/{identifier}/stats",
        response_model=StatsResponse,
        responses=NOT_FOUND_RESPONSES,
        summary="Returns only the base stats",
    )
    async def get_pokemon_stats(
        identifier: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        return await service.get_stats(identifier)

    @app.get(
        "/pokemon/{identifier}/types",
        response_model=TypesResponse,
        responses=NOT_FOUND_RESPONSES,
        summary="Returns only the types",
    )
    async def get_pokemon_types(
        identifier: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        return await service.get_types(identifier)

    @app.get(
        "/pokemon/{identifier}/abilities",
        response_model=AbilitiesResponse,
        responses=NOT_FOUND_RESPONSES,
        summary="Returns only the abilities",
    )
    async def get_pokemon_abilities(
        identifier: str,
        service: PokemonService = Depends(get_pokemon_service),
    ):
        return await service.get_abilities(identifier)


def _register_collection_routes(app: FastAPI) -> None:
    @app.post("/favorites/{identifier}", response_model=FavoritesResponse)
    async def add_favorite(
        identifier: str,
        store: CollectionStore = Depends(get_collection_store),
    ):
        return FavoritesResponse(favorites=store.add(CollectionName.FAVORITES, identifier))

    @app.get("/favorites", response_model=FavoritesResponse)
    async def list_favorites(store: CollectionStore = Depends(get_collection_store)):
        return FavoritesResponse(favorites=store.list(CollectionName.FAVORITES))

    @app.post("/comparisons/{identifier}", response_model=ComparisonsResponse)
    async def add_comparison(
        identifier: str,
        store: CollectionStore = Depends(get_collection_store),
    ):
        return ComparisonsResponse(comparisons=store.add(CollectionName.COMPARISONS, identifier))

    @app.get("/comparisons", response_model=ComparisonsResponse)
    async def list_comparisons(store: CollectionStore = Depends(get_collection_store)):
        return ComparisonsResponse(comparisons=store.list(CollectionName.COMPARISONS))


app = create_app()
