"""Unit tests for pydantic settings and logging setup."""

import json
import logging
import sys

import pytest
from pydantic import ValidationError as PydanticValidationError

from rated_ir.config import Settings, get_logger, setup_logging
from rated_ir.config.logging import JSONExceptionFormatter
from rated_ir.core.services import RevisionWeights, SessionConfig

pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ALPHA", "BETA", "GAMMA", "PAGE_SIZE", "FEEDBACK_MODE"):
            monkeypatch.delenv(f"RATED_IR_{name}", raising=False)
        settings = Settings(_env_file=None)

        assert settings.revision_weights() == RevisionWeights(8.0, 16.0, 4.0)
        assert settings.session_config() == SessionConfig(page_size=10, max_rating_attempts=None)
        assert settings.feedback_mode == "graded"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("RATED_IR_BETA", "12")
        monkeypatch.setenv("RATED_IR_PAGE_SIZE", "5")
        monkeypatch.setenv("RATED_IR_MAX_RATING_ATTEMPTS", "3")

        settings = Settings(_env_file=None)

        assert settings.revision_weights().beta == 12.0
        assert settings.session_config() == SessionConfig(page_size=5, max_rating_attempts=3)

    @pytest.mark.parametrize(
        "field,value",
        [("alpha", 0), ("gamma", -1), ("page_size", 0), ("max_rating_attempts", 0)],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, **{field: value})

    def test_unknown_feedback_mode_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, feedback_mode="thumbs")

    def test_binary_mode_keeps_its_own_default_weights(self):
        settings = Settings(_env_file=None, feedback_mode="binary", alpha=8.0, beta=16.0, gamma=4.0)
        assert settings.revision_weights() is None
        assert settings.revision_weights("graded") == RevisionWeights()

    def test_binary_mode_with_custom_weights(self):
        settings = Settings(_env_file=None, alpha=2.0, beta=3.0, gamma=1.0)
        assert settings.revision_weights("binary") == RevisionWeights(2.0, 3.0, 1.0)


class TestLogging:
    def test_setup_logging_sets_level_and_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "rated_ir.log"
        logger = setup_logging("DEBUG", log_file=log_file)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        get_logger("core").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")

        setup_logging()

    def test_child_loggers_share_namespace(self):
        assert get_logger("core.services").name == "rated_ir.core.services"
        assert get_logger().name == "rated_ir"

    def test_json_formatter_includes_exception(self):
        formatter = JSONExceptionFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "rated_ir", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        entry = json.loads(formatter.format(record))

        assert entry["message"] == "failed"
        assert entry["exception"]["type"] == "ValueError"
        assert entry["exception"]["message"] == "boom"
