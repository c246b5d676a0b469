"""Sprint03: user profile CRUD API."""

__version__ = "0.1.0"
