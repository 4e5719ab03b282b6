"""Tests for log record context."""

from loguru import logger

from settings.logging import setup_logging


class TestSetupLogging:
    def test_records_outside_requests_are_tagged(self):
        setup_logging(level="INFO", to_file=False)
        lines = []
        sink = logger.add(lines.append, format="{extra[request]} {message}")
        try:
            logger.info("loaded 3 rows")
        finally:
            logger.remove(sink)

        assert lines[-1].strip() == "- loaded 3 rows"

    def test_contextualized_records(self):
        setup_logging(level="INFO", to_file=False)
        lines = []
        sink = logger.add(lines.append, format="{extra[request]} {message}")
        try:
            with logger.contextualize(request="GET /api/schools/1/stats"):
                logger.info("Cache miss")
        finally:
            logger.remove(sink)

        assert lines[-1].strip() == "GET /api/schools/1/stats Cache miss"
