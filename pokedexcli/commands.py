"""The Pokedex commands and the state they share."""

from __future__ import annotations

import json
import random
import sys
import urllib.error
import urllib.request
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pokedexcli.cache import Cache
from pokedexcli.models import LocationAreaDetail, LocationAreasPage, Pokemon

API_ROOT = "https://pokeapi.co/api/v2"
FIRST_PAGE_URL = f"{API_ROOT}/location-area/?limit=20&offset=0"
CACHE_INTERVAL = 30.0
CATCH_ROLL = 300
REQUEST_TIMEOUT = 30.0


class CommandError(Exception):
    """A command could not be carried out."""


@dataclass
class Config:
    """Paging state, response cache and random source shared by the commands."""

    next: str | None = None
    previous: str | None = None
    cache: Cache = field(default_factory=lambda: Cache(CACHE_INTERVAL))
    rng: random.Random = field(default_factory=random.Random)


class Pokedex:
    """The Pokemon caught so far, keyed by name."""

    def __init__(self) -> None:
        self._pokemon: dict[str, Pokemon] = {}

    def add(self, pokemon: Pokemon) -> None:
        """Record a caught Pokemon, replacing an earlier one of the same name."""
        self._pokemon[pokemon.name] = pokemon

    def get(self, name: str) -> Pokemon | None:
        """Return the caught Pokemon called ``name``, or None."""
        return self._pokemon.get(name)

    def names(self) -> list[str]:
        """Names of the caught Pokemon in the order they were caught."""
        return list(self._pokemon)

    def __contains__(self, name: object) -> bool:
        return name in self._pokemon

    def __len__(self) -> int:
        return len(self._pokemon)

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(list(self._pokemon.values()))


Callback = Callable[[Config, list[str], Pokedex], None]


@dataclass(frozen=True)
class Command:
    """A command the prompt understands."""

    name: str
    description: str
    callback: Callback


def fetch(url: str, cache: Cache | None) -> bytes:
    """Return the body at ``url``, from ``cache`` when it holds it.

    A fetched body is stored in ``cache`` under the URL that answered.
    Raises CommandError when the request fails or the status is above 299.
    """
    if cache is not None:
        cached = cache.get(url)
        if cached:
            return cached
    try:
        with urllib.request.urlopen(url, timeout=REQUEST_TIMEOUT) as response:
            body = response.read()
            final_url = response.geturl() or url
    except urllib.error.HTTPError as error:
        body = error.read() or b""
        if cache is not None:
            cache.add(url, body)
        raise CommandError(
            f"response failed with status code: {error.code} "
            f"and body: {body.decode('utf-8', errors='replace')}"
        ) from error
    except (urllib.error.URLError, OSError) as error:
        raise CommandError(str(error)) from error
    if cache is not None:
        cache.add(final_url, body)
    return body


def _decode(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise CommandError(f"invalid response: {error}") from error


def _load(body: bytes, parse: Callable[[Any], Any]) -> Any:
    data = _decode(body)
    try:
        return parse(data)
    except ValueError as error:
        raise CommandError(f"invalid response: {error}") from error


def _stdout_flush() -> None:
    sys.stdout.flush()


def command_exit(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Say goodbye, stop the cache's background reaper and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    _stdout_flush()
    config.cache.close()
    raise SystemExit(0)


def command_help(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Print the list of commands."""
    print("Welcome to the Pokedex!")
    print("Usage:")
    for command in build_commands().values():
        print(f"{command.name}: {command.description}")


def _show_page(config: Config, url: str) -> None:
    page: LocationAreasPage = _load(fetch(url, config.cache), LocationAreasPage.from_dict)
    config.next = page.next
    config.previous = page.previous
    for area in page.areas:
        print(area.name)


def command_map(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Print the next page of location areas."""
    _show_page(config, config.next if config.next is not None else FIRST_PAGE_URL)


def command_mapb(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Print the previous page of location areas."""
    if config.previous is None:
        print("youre on the first page, type map to print it")
        return
    _show_page(config, config.previous)


def command_explore(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """List the Pokemon found in a location area."""
    if len(args) < 2:
        raise CommandError("no location area specified")
    area_name = args[1]
    url = f"{API_ROOT}/location-area/{area_name}/"
    print(f"Exploring {area_name}...")
    area: LocationAreaDetail = _load(fetch(url, config.cache), LocationAreaDetail.from_dict)
    print("Found Pokemon:")
    for encounter in area.pokemon_encounters:
        print(f" - {encounter.name}")


def command_catch(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Throw a Pokeball; a caught Pokemon goes into the Pokedex."""
    if len(args) < 2:
        raise CommandError("no Pokemon specified")
    target = args[1]
    print(f"Throwing a Pokeball at {target}...")
    pokemon: Pokemon = _load(fetch(f"{API_ROOT}/pokemon/{target}", None), Pokemon.from_dict)
    # Base experience tops out at 255, so every Pokemon keeps some chance of being caught.
    if config.rng.randrange(CATCH_ROLL) > pokemon.base_experience:
        print(f"{target} was caught!")
        print("You may now inspect it with the inspect command.")
        pokedex.add(pokemon)
    else:
        print(f"{target} escaped!")


def command_inspect(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Print the details of a caught Pokemon."""
    if len(args) < 2:
        raise CommandError("no Pokemon specified")
    pokemon = pokedex.get(args[1])
    if pokemon is None:
        print("Pokemon does not exist or has not been caught yet")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.name}: {stat.base_stat}")
    print("Types:")
    for pokemon_type in pokemon.types:
        print(f"  - {pokemon_type.name}")


def command_pokedex(config: Config, args: list[str], pokedex: Pokedex) -> None:
    """Print the names of the caught Pokemon."""
    print("Your Pokedex:")
    for name in pokedex.names():
        print(f" - {name}")


def build_commands() -> dict[str, Command]:
    """Return every command keyed by the word that starts it."""
    return {
        "exit": Command("exit", "Exit the Pokedex", command_exit),
        "help": Command("help", "Displays a help message", command_help),
        "map": Command(
            "map",
            "Displays the names of 20 locations and its subsequent use prints the next 20",
            command_map,
        ),
        "mapb": Command("mapb", "Displays the names of previous 20 locations", command_mapb),
        "explore": Command(
            "explore []", "Lists all of the Pokemon in a location", command_explore
        ),
        "catch": Command(
            "catch []",
            "Catches a chosen pokemon and puts him into the pokedex",
            command_catch,
        ),
        "inspect": Command(
            "inspect []", "Inspects a caught pokemon and prints its stats", command_inspect
        ),
        "pokedex": Command("pokedex []", "Shows caught pokemon", command_pokedex),
    }