"""SQLite-backed store for blog articles and their comments."""

__version__ = "0.1.0"
__all__ = ["cli", "database", "models", "queries", "schema"]