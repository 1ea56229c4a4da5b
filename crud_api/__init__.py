"""User CRUD REST service (FastAPI + SQLAlchemy)."""

__version__ = "1.0.0"
