"""Simple runner for the FastAPI app.

Usage:
  python run.py

Optional environment variables:
  HOST (default 0.0.0.0)
  PORT (default 3000)
  UVICORN_RELOAD (true/false)
"""
import os
import sys

import uvicorn


def main():
    # ensure project root is on PYTHONPATH when run from repo root
    cwd = os.path.dirname(os.path.abspath(__file__))
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    from app.config.settings import settings

    reload_env = os.getenv("UVICORN_RELOAD", "false").lower()
    reload_flag = reload_env in ("1", "true", "yes", "on")

    # module string so reload works
    uvicorn.run("app:app", host=settings.HOST, port=settings.PORT, reload=reload_flag)


if __name__ == "__main__":
    main()
