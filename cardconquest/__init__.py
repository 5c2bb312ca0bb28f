"""Rules engine for a turn-based card conquest game: cards, battles, markets, map and texts."""

__version__ = "0.1.0"