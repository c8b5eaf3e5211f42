"""Product catalog search facade over Meilisearch."""

__version__ = "1.0.0"
