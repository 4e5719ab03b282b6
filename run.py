#!/usr/bin/env python3
"""Run the statistics API."""

import uvicorn

from settings import API_HOST, API_PORT, LOG_LEVEL
from settings.logging import setup_logging

setup_logging(level=LOG_LEVEL, to_file=True)
uvicorn.run("web.server:app", host=API_HOST, port=API_PORT)
