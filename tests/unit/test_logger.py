"""Test structlog configuration."""

import json
import logging

from course_domain.observability.logger import setup_logging


class TestSetupLogging:
    def test_json_renders_stdlib_records(self, capsys):
        setup_logging(level="INFO", format="json")
        logging.getLogger("course_domain.domain.roles").info("Roles registered: EDITOR")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["event"] == "Roles registered: EDITOR"
        assert entry["level"] == "info"
        assert entry["component"] == "course_domain"
        assert entry["logger"] == "course_domain.domain.roles"

    def test_level_filters(self, capsys):
        setup_logging(level="WARNING", format="json")
        logging.getLogger("course_domain").info("hidden")
        assert capsys.readouterr().err == ""

    def test_console_format(self, capsys):
        setup_logging(level="DEBUG", format="console")
        logging.getLogger("course_domain").debug("visible")
        assert "visible" in capsys.readouterr().err
