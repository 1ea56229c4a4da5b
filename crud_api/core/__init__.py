"""
Core utilities shared across the user API.

This package hosts configuration helpers (env vars, database URL), logging
setup and the HTTP middlewares mounted by the app factory.
"""
