"""User accounts and login: domain models, application services, a SQLite adapter and handlers."""

__version__ = "0.1.0"

__all__ = ["application", "auth", "db", "domain", "handler"]