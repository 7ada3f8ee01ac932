"""Character API - user auth with JWT and role-gated character CRUD."""

__version__ = "0.1.0"
