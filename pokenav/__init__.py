"""Pokedex navigator: one-at-a-time Pokemon lookups against PokeAPI."""
