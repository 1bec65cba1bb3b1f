"""Repository-root entry for the weather API.

Lets uvicorn find the app without installing the package or passing
`--app-dir backend`:

  uvicorn asgi:app --reload
  python asgi.py            # binds HOST:PORT from the environment

"""
import os
import sys

BACKEND_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "backend")
if BACKEND_PATH not in sys.path:
    sys.path.insert(0, BACKEND_PATH)

from app.main import app, run  # noqa: E402,F401

if __name__ == "__main__":
    run()
