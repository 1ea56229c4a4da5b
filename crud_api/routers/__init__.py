"""
FastAPI routers grouped by domain (users, system probes).

Each module exposes an APIRouter included by the app factory in app.py.
"""
