"""zenn-scaffold: create Zenn article stubs with random slugs."""

__version__ = "0.1.0"
