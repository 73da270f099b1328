import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Allow requests from this origin
ALLOW_ORIGIN: Optional[str] = os.environ.get("ALLOW_ORIGIN")

# If true, enable docs and openapi.json endpoints
ENABLE_DOCS: bool = os.environ.get("ENABLE_DOCS") == "1"

# Root log level (DEBUG shows per-route timings)
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

# slowapi limit string applied to permission introspection routes
RATE_LIMIT: str = os.environ.get("RATE_LIMIT", "60/minute")

# Development server (server.py)
HOST: str = os.environ.get("HOST", "127.0.0.1")
PORT: int = int(os.environ.get("PORT", "8000"))
RELOAD: bool = os.environ.get("RELOAD", "1") == "1"
