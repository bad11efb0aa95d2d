"""PostAPI: a small blog service with bearer token auth and author-only edits."""

__version__ = "0.1.0"
