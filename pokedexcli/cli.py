"""The interactive Pokedex prompt."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping

from pokedexcli.commands import Command, CommandError, Config, Pokedex, build_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def dispatch(
    words: list[str],
    commands: Mapping[str, Command],
    config: Config,
    pokedex: Pokedex,
) -> bool:
    """Run the command named by the first word; return whether one was found.

    Problems are reported on standard output rather than raised.
    """
    if not words:
        print("no input")
        return False
    command = commands.get(words[0])
    if command is None:
        print("Unknown command")
        return False
    try:
        command.callback(config, words, pokedex)
    except CommandError as error:
        print(error)
    return True


def repl(lines: Iterable[str], config: Config, pokedex: Pokedex) -> None:
    """Prompt for and run commands from ``lines`` until they run out."""
    commands = build_commands()
    source = iter(lines)
    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = next(source)
        except StopIteration:
            print()
            return
        dispatch(clean_input(line), commands, config, pokedex)


def main(argv: list[str] | None = None) -> int:
    """Start the Pokedex prompt on standard input."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex in the terminal."
    )
    parser.parse_args(argv)
    config = Config()
    try:
        repl(sys.stdin, config, Pokedex())
    finally:
        config.cache.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())