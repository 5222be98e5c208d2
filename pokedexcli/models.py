"""Typed views of the PokeAPI responses the Pokedex uses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array, got {value!r}")
    return value


def _object(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    return _mapping(value, key)


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL it refers to."""

    name: str
    url: str

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationAreasPage:
    """One page of the location-area listing."""

    count: int
    next: str | None
    previous: str | None
    areas: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationAreasPage:
        data = _mapping(data, "location area page")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            areas=[NamedResource.from_dict(item) for item in _list(data, "results")],
        )


@dataclass(frozen=True)
class LocationAreaDetail:
    """A single location area and the Pokemon that can be met there."""

    id: int
    name: str
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationAreaDetail:
        data = _mapping(data, "location area")
        encounters = [
            NamedResource.from_dict(_object(_mapping(item, "encounter"), "pokemon"))
            for item in _list(data, "pokemon_encounters")
        ]
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            pokemon_encounters=encounters,
        )


@dataclass(frozen=True)
class PokemonStat:
    """A base stat of a Pokemon."""

    name: str
    base_stat: int
    effort: int

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data, "stat")
        return cls(
            name=_str(_object(data, "stat"), "name"),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class PokemonType:
    """One of a Pokemon's types and its slot."""

    slot: int
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        data = _mapping(data, "type")
        return cls(slot=_int(data, "slot"), name=_str(_object(data, "type"), "name"))


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokemon record the Pokedex shows and uses."""

    id: int
    name: str
    base_experience: int
    height: int
    weight: int
    is_default: bool = False
    order: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            is_default=_bool(data, "is_default"),
            order=_int(data, "order"),
            stats=[PokemonStat.from_dict(item) for item in _list(data, "stats")],
            types=[PokemonType.from_dict(item) for item in _list(data, "types")],
        )