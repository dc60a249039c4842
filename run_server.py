"""
Photo Prep staging API server

Usage:
    python run_server.py
    uvicorn api.app:app --host 0.0.0.0 --port 8000
"""

import os

import uvicorn

from api.app import app


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.environ.get("PHOTOPREP_HOST", "0.0.0.0"),
        port=int(os.environ.get("PHOTOPREP_PORT", "8000")),
        log_level="info",
    )
