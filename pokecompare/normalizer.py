"""Narrows raw PokeAPI `/pokemon/{id}` payloads into `PokemonRecord`.

Only the fields the API exposes are kept; everything else the upstream sends
(moves, game indices, forms, ...) is dropped.
"""
from typing import Any, Mapping

from pydantic import ValidationError

from pokecompare.errors import MalformedUpstreamPayload
from pokecompare.models import PokemonRecord, PokemonSprites

FULL_DETAIL_FIELDS = ("height", "weight", "base_experience")


def _image_url(node: Any, *path: str) -> str | None:
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node if isinstance(node, str) else None


def extract_sprites(raw_sprites: Any) -> PokemonSprites | None:
    """Picks the four images the UI shows; any of them may be missing upstream."""
    if not isinstance(raw_sprites, Mapping):
        return None
    return PokemonSprites(
        front_default=_image_url(raw_sprites, "front_default"),
        front_shiny=_image_url(raw_sprites, "front_shiny"),
        official_artwork=_image_url(raw_sprites, "other", "official-artwork", "front_default"),
        dream_world=_image_url(raw_sprites, "other", "dream_world", "front_default"),
    )


def normalize(raw: Any, *, full: bool = True) -> PokemonRecord:
    if not isinstance(raw, Mapping):
        raise MalformedUpstreamPayload(None, "Upstream payload is not a JSON object.")

    identifier = raw.get("id")
    name = raw.get("name")
    # bool is an int subclass; reject it explicitly
    if not isinstance(identifier, int) or isinstance(identifier, bool):
        raise MalformedUpstreamPayload(name, "Upstream payload has no integer 'id'.")
    if not isinstance(name, str) or not name:
        raise MalformedUpstreamPayload(identifier, "Upstream payload has no 'name'.")

    fields = {
        "id": identifier,
        "name": name,
        "stats": raw.get("stats"),
        "types": raw.get("types"),
        "abilities": raw.get("abilities"),
    }
    if full:
        fields.update({key: raw.get(key) for key in FULL_DETAIL_FIELDS})
        fields["sprites"] = extract_sprites(raw.get("sprites"))

    try:
        return PokemonRecord.model_validate(fields)
    except ValidationError as e:
        raise MalformedUpstreamPayload(
            identifier, f"Upstream payload failed validation: {e.error_count()} error(s)."
        ) from e
