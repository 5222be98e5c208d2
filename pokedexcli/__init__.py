"""Interactive command-line Pokedex with an in-memory, expiring response cache."""

__version__ = "0.1.0"