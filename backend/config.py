"""PatrolLink backend configuration — environment driven, .env aware."""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Load .env from project root before reading os.environ
load_dotenv(PROJECT_ROOT / ".env")

# Server
HOST = os.environ.get("PATROLLINK_HOST", "0.0.0.0")
PORT = int(os.environ.get("PATROLLINK_PORT", "4000"))
RELOAD = os.environ.get("PATROLLINK_RELOAD", "0") == "1"

# Logging
LOG_LEVEL = os.environ.get("PATROLLINK_LOG_LEVEL", "INFO").upper()

# CORS — comma separated origins, "*" allows all
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("PATROLLINK_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
