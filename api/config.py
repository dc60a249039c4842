"""
API Configuration

Environment-driven settings and logging setup for the staging API.
"""

import logging
import os

APP_TITLE = "Photo Prep Staging API"
APP_DESCRIPTION = "Room classification + clutter removal recommendations for real-estate photos"

LOG_LEVEL = os.environ.get("PHOTOPREP_LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("PHOTOPREP_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Maximum detections accepted per photo
MAX_DETECTIONS = int(os.environ.get("PHOTOPREP_MAX_DETECTIONS", "500"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the API process"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
