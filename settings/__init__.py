"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("GES_DB_PATH", "ges_stats.duckdb")

# Logging
LOG_DIR = Path(os.getenv("GES_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("GES_LOG_LEVEL", "INFO")

# Cache
CACHE_BACKEND = os.getenv("CACHE_BACKEND", "memory")
CACHE_TTL = int(os.getenv("CACHE_TTL", "3600"))
CACHE_SINGLE_FLIGHT = os.getenv("CACHE_SINGLE_FLIGHT", "0").lower() in ("1", "true", "yes")

# Redis
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
REDIS_CONNECT_TIMEOUT = 5
REDIS_CONNECT_ATTEMPTS = 5

# API
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_URL = os.getenv("GES_API_URL", f"http://{API_HOST}:{API_PORT}")
API_TIMEOUT = 10
