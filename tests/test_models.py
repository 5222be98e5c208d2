import json

import pytest

from pokedexcli.models import (
    LocationAreaDetail,
    LocationAreasPage,
    NamedResource,
    Pokemon,
    PokemonStat,
    PokemonType,
)

PAGE = {
    "count": 1089,
    "next": "https://pokeapi.co/api/v2/location-area/?offset=20&limit=20",
    "previous": None,
    "results": [
        {"name": "canalave-city-area", "url": "https://pokeapi.co/api/v2/location-area/1/"},
        {"name": "eterna-city-area", "url": "https://pokeapi.co/api/v2/location-area/2/"},
    ],
}

AREA = {
    "id": 1,
    "name": "canalave-city-area",
    "pokemon_encounters": [
        {"pokemon": {"name": "tentacool", "url": "https://pokeapi.co/api/v2/pokemon/72/"}},
        {"pokemon": {"name": "tentacruel", "url": "https://pokeapi.co/api/v2/pokemon/73/"}},
    ],
}

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "is_default": True,
    "order": 35,
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "https://pokeapi.co/api/v2/stat/1/"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": "https://pokeapi.co/api/v2/stat/6/"}},
    ],
    "types": [
        {"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.co/api/v2/type/13/"}},
    ],
    "sprites": {"front_default": None},
}


def test_named_resource_from_dict():
    data = PAGE["results"][0]
    resource = NamedResource.from_dict(data)
    assert resource == NamedResource(name=data["name"], url=data["url"])


def test_location_areas_page_from_dict():
    page = LocationAreasPage.from_dict(PAGE)
    assert page.count == PAGE["count"]
    assert page.next == PAGE["next"]
    assert page.previous is None
    assert [area.name for area in page.areas] == [r["name"] for r in PAGE["results"]]


def test_location_areas_page_parses_json_text():
    page = LocationAreasPage.from_dict(json.loads(json.dumps(PAGE)))
    assert page == LocationAreasPage.from_dict(PAGE)


def test_location_areas_page_last_page_has_no_next():
    data = dict(PAGE, next=None, previous=PAGE["next"])
    page = LocationAreasPage.from_dict(data)
    assert page.next is None
    assert page.previous == PAGE["next"]


def test_location_area_detail_from_dict():
    detail = LocationAreaDetail.from_dict(AREA)
    assert detail.id == AREA["id"]
    assert detail.name == AREA["name"]
    assert [p.name for p in detail.pokemon_encounters] == ["tentacool", "tentacruel"]
    assert detail.pokemon_encounters[0].url == AREA["pokemon_encounters"][0]["pokemon"]["url"]


def test_pokemon_stat_and_type_from_dict():
    stat = PokemonStat.from_dict(PIKACHU["stats"][1])
    assert stat == PokemonStat(name="speed", base_stat=90, effort=2)
    kind = PokemonType.from_dict(PIKACHU["types"][0])
    assert kind == PokemonType(slot=1, name="electric")


def test_pokemon_from_dict():
    pokemon = Pokemon.from_dict(PIKACHU)
    assert pokemon.name == PIKACHU["name"]
    assert pokemon.base_experience == PIKACHU["base_experience"]
    assert (pokemon.height, pokemon.weight) == (PIKACHU["height"], PIKACHU["weight"])
    assert pokemon.is_default is True
    assert [s.name for s in pokemon.stats] == ["hp", "speed"]
    assert [s.base_stat for s in pokemon.stats] == [35, 90]
    assert [t.name for t in pokemon.types] == ["electric"]


def test_missing_fields_take_empty_values():
    pokemon = Pokemon.from_dict({"name": "ditto"})
    assert pokemon.name == "ditto"
    assert pokemon.base_experience == 0
    assert pokemon.stats == []
    assert pokemon.types == []


def test_page_without_results_has_no_areas():
    page = LocationAreasPage.from_dict({"count": PAGE["count"]})
    assert page.areas == []
    assert page.next is None


@pytest.mark.parametrize(
    "model", [NamedResource, LocationAreasPage, LocationAreaDetail, Pokemon]
)
def test_non_object_is_rejected(model):
    with pytest.raises(ValueError):
        model.from_dict(["not", "an", "object"])


def test_wrong_field_type_is_rejected():
    with pytest.raises(ValueError):
        Pokemon.from_dict(dict(PIKACHU, base_experience="high"))


def test_wrong_next_type_is_rejected():
    with pytest.raises(ValueError):
        LocationAreasPage.from_dict(dict(PAGE, next=20))


def test_results_must_be_a_list():
    with pytest.raises(ValueError):
        LocationAreasPage.from_dict(dict(PAGE, results={"name": "x"}))