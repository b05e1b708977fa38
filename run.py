"""Entry point for the Employee API.

Launches the FastAPI application under uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port, log level and keep‑alive timeout are read from the
environment (``HOST``, ``PORT``, ``LOG_LEVEL``, ``TIMEOUT_KEEP_ALIVE``);
see ``employee_api/app/core/config.py`` for all supported variables.

Usage:
    python run.py
"""

from employee_api.app.main import run


if __name__ == "__main__":
    run()
