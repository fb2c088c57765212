from enum import Enum

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr


# Building blocks of the upstream payload that we keep (Internal + Public Contract)
class NamedResource(BaseModel):
    name: StrictStr
    url: StrictStr = ""


class PokemonStat(BaseModel):
    base_stat: StrictInt = Field(ge=0, le=255)
    effort: StrictInt
    stat: NamedResource

    @property
    def stat_name(self) -> str:
        return self.stat.name


class PokemonType(BaseModel):
    slot: StrictInt = Field(ge=1, le=2)  # slot 1 is the primary type
    type: NamedResource

    @property
    def type_name(self) -> str:
        return self.type.name


class PokemonAbility(BaseModel):
    ability: NamedResource
    is_hidden: StrictBool
    slot: StrictInt

    @property
    def ability_name(self) -> str:
        return self.ability.name


class PokemonSprites(BaseModel):
    front_default: str | None = None
    front_shiny: str | None = None
    official_artwork: str | None = None
    dream_world: str | None = None


# Model for the normalized record (Public Endpoint: full info)
class PokemonRecord(BaseModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1)
    stats: list[PokemonStat]
    types: list[PokemonType]
    abilities: list[PokemonAbility]
    # Only filled in for full-detail normalization
    height: StrictInt | None = None  # decimetres
    weight: StrictInt | None = None  # hectograms
    base_experience: StrictInt | None = None
    sprites: PokemonSprites | None = None


# Projection responses (Public Endpoints: stats / types / abilities)
class StatsResponse(BaseModel):
    stats: list[PokemonStat]


class TypesResponse(BaseModel):
    types: list[PokemonType]


class AbilitiesResponse(BaseModel):
    abilities: list[PokemonAbility]


class CollectionName(str, Enum):
    FAVORITES = "favorites"
    COMPARISONS = "comparisons"


# Collection listings (Public Endpoints: favorites / comparisons)
class FavoritesResponse(BaseModel):
    favorites: list[str]


class ComparisonsResponse(BaseModel):
    comparisons: list[str]


class ErrorResponse(BaseModel):
    error: str
