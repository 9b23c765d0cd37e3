"""Package initializer for `app`.

Exposes the FastAPI instance built in `app.main` as `app.app`, so tests and
the runner can do `from app import app` or point uvicorn at `app:app`.
"""
from app.main import app

__all__ = ["app"]
