# pokedexcli

An interactive command-line Pokedex. You can page through the location areas
of the Pokemon world, see which Pokemon live in an area, try to catch them, and
look at the ones you have caught. The data comes from the public PokeAPI
service. It uses only the standard library.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

The command takes no options apart from `--help`. You get a `Pokedex > `
prompt. Each line is lower-cased and split into words before it is read, so
`CATCH Pikachu` does the same as `catch pikachu`. An empty line prints
`no input`, and a word that is not a command prints `Unknown command`. The
prompt ends on `exit` or at the end of input.

| Command             | What it does                                                       |
|---------------------|--------------------------------------------------------------------|
| `help`              | Prints a help message listing every command                        |
| `map`               | Prints 20 location area names; each further use prints the next 20 |
| `mapb`              | Prints the previous 20 location area names                        |
| `explore <area>`    | Lists the Pokemon that can be found in a location area             |
| `catch <pokemon>`   | Throws a Pokeball; a caught Pokemon goes into your Pokedex         |
| `inspect <pokemon>` | Prints the height, weight, stats and types of a caught Pokemon     |
| `pokedex`           | Lists every Pokemon you have caught                                |
| `exit`              | Closes the Pokedex                                                 |

`mapb` before any earlier page has been seen prints
`youre on the first page, type map to print it`. `explore`, `catch` and
`inspect` need a name after them; without one they report that none was given.
A failed request is reported with its status code and response body, and the
prompt carries on.

A catch rolls a random number below 300 and succeeds when the roll is greater
than the Pokemon's base experience, so a Pokemon with more base experience is
harder to catch.

The pages shown by `map` and `mapb` and the areas shown by `explore` are kept
in an in-memory cache. Every 30 seconds the cache drops entries that are more
than 30 seconds old. `catch` always asks the service afresh.

A short session (names and numbers depend on the service's data):

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
 ...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > inspect magikarp
Name: magikarp
Height: 9
Weight: 100
Stats:
  -hp: 20
  ...
Types:
  - water
Pokedex > exit
Closing the Pokedex... Goodbye!
```

## Using it from Python

- `pokedexcli.cli`: `clean_input(text)` splits a line into lower-case words;
  `dispatch(words, commands, config, pokedex)` runs one command and returns
  whether it was found; `repl(lines, config, pokedex)` runs the prompt over any
  iterable of lines; `main(argv=None)` starts the prompt on standard input.
- `pokedexcli.commands`: `Config` (paging state, cache and random source),
  `Pokedex` (`add`, `get`, `names`), `Command`, `build_commands()`, the
  `command_*` functions, `fetch(url, cache)` and `CommandError`.
- `pokedexcli.cache`: `Cache(interval)` with `add`, `get`, `reap` and `close`;
  it can be used as a context manager, which stops its background thread.
- `pokedexcli.models`: `NamedResource`, `LocationAreasPage`,
  `LocationAreaDetail`, `Pokemon`, `PokemonStat` and `PokemonType`, each built
  from decoded JSON with `from_dict`, which raises `ValueError` on a field of
  the wrong type.

## What it does not do

Caught Pokemon live only as long as the prompt runs; nothing is saved to disk,
and each new session starts with an empty Pokedex. There is no offline mode:
without access to the service, `map`, `explore` and `catch` report an error.

## Running the tests

```
pip install ".[test]"
pytest
```