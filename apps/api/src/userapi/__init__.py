"""User API - in-memory user CRUD service."""

__version__ = "0.1.0"
