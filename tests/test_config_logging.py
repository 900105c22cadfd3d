"""Tests for environment settings and the structured log formatter."""

import logging

from recipe_normalizer.config import EngineSettings, get_settings
from recipe_normalizer.logging_utils import RUN_ID, StructuredFormatter, get_logger


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "DESCRIPTION_MAX_CHARS", "PROGRESS_EVERY"):
            monkeypatch.delenv(f"RECIPE_NORMALIZER_{name}", raising=False)
        assert get_settings() == EngineSettings()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RECIPE_NORMALIZER_LOG_LEVEL", "debug")
        monkeypatch.setenv("RECIPE_NORMALIZER_DESCRIPTION_MAX_CHARS", "80")
        monkeypatch.setenv("RECIPE_NORMALIZER_PROGRESS_EVERY", "10")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.description_max_chars == 80
        assert settings.progress_every == 10

    def test_bad_int_falls_back(self, monkeypatch):
        monkeypatch.setenv("RECIPE_NORMALIZER_DESCRIPTION_MAX_CHARS", "lots")
        assert get_settings().description_max_chars == 500

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("RECIPE_NORMALIZER_LOG_LEVEL", "verbose")
        level = get_settings().log_level
        assert level == "INFO"
        # the value must be accepted by setLevel, which init_logging calls at import
        logging.getLogger("recipe_normalizer.tests.level_check").setLevel(level)

    def test_progress_every_at_least_one(self, monkeypatch):
        monkeypatch.setenv("RECIPE_NORMALIZER_PROGRESS_EVERY", "0")
        assert get_settings().progress_every == 1


class TestStructuredFormatter:
    def _record(self, **extra):
        record = logging.LogRecord(
            name="recipe_normalizer.segmenter",
            level=logging.INFO,
            pathname="/tmp/segmenter.py",
            lineno=42,
            msg="Split %d lines",
            args=(3,),
            exc_info=None,
            func="segment_text",
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_line_layout(self):
        line = StructuredFormatter().format(
            self._record(invoking_func="segment_text", next_step="Parse buckets")
        )
        fields = line.split("|")
        assert fields[0] == RUN_ID
        assert fields[3] == "INFO"
        assert fields[4] == "segmenter.py:42"
        assert fields[5] == "segmenter.segment_text"
        assert fields[6].startswith("Split raw recipe text")
        assert fields[7] == "segment_text"
        assert fields[9] == "Split 3 lines"
        assert fields[10] == "Parse buckets"
        assert line.endswith("<END>")

    def test_missing_extras_are_blank(self):
        fields = StructuredFormatter().format(self._record()).split("|")
        assert fields[7] == ""
        assert fields[8] == ""

    def test_get_logger_namespaced(self):
        assert get_logger("assembler").name == "recipe_normalizer.assembler"
        assert logging.getLogger("recipe_normalizer").handlers
