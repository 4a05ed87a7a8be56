"""Robot maze solver: parse a maze, show it, and walk robots from start to end."""

__version__ = "0.1.0"