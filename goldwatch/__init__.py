"""Gold price fetching, price chart download and SQLite-backed holdings tracking."""

__version__ = "1.0.1"