"""
High-level use cases for the user API.

Routers call these services instead of touching repositories or ORM sessions
directly.
"""
