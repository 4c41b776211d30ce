"""Text-board snake game engine, terminal player, password checks, a growable vector and a Bork translator."""

__version__ = "0.1.0"