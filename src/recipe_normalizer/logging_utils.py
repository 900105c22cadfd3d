"""
logging_utils.py

Central logging utilities for the Recipe Normalizer.

Log format (one line):
<RunId>|<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<ModulePurpose>|
<InvokingFunc>|<InvokingFuncPurpose>|<Detail>|<NextStep>|<Resolution>|<END>
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Dict

RUN_ID: str = uuid.uuid4().hex[:8]


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that emits a single '|' separated line conforming
    to the log template above.
    """

    # High-level purposes by module name
    MODULE_PURPOSES: Dict[str, str] = {
        "segmenter": "Split raw recipe text into ingredient / instruction / general buckets",
        "ingredients": "Tokenize one ingredient line into quantity, unit, name and notes",
        "instructions": "Clean instruction lines of numbering, bullets and markdown",
        "metadata": "Infer servings, times, difficulty, cuisine, course, meal type and diet",
        "sources": "Adapt dataset rows into CommentSource / ArraySource inputs",
        "assembler": "Compose the parsing stages into one normalized RecipeData record",
        "config": "Build engine settings from environment variables",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        """Format log record into structured pipe-delimited format."""
        # Date / time from record
        dt = datetime.datetime.fromtimestamp(record.created)
        date_str = dt.strftime("%Y-%m-%d")
        time_str = dt.strftime("%H:%M:%S")

        # Run / execution id
        run_id = getattr(record, "run_id", RUN_ID)

        # Level, code location, function, module
        level = record.levelname
        code_location = f"{record.filename}:{record.lineno}"
        func_name = record.funcName
        module_name = record.module
        module_purpose = self.MODULE_PURPOSES.get(module_name, "")

        # Optional extra context supplied via logger calls
        invoking_func = getattr(record, "invoking_func", "")
        invoking_purpose = getattr(record, "invoking_purpose", "")
        next_step = getattr(record, "next_step", "")
        resolution = getattr(record, "resolution", "")

        detail = record.getMessage()
        line = (
            f"{run_id}|{date_str}|{time_str}|{level}|{code_location}|"
            f"{module_name}.{func_name}|{module_purpose}|"
            f"{invoking_func}|{invoking_purpose}|"
            f"{detail}|{next_step}|{resolution}|<END>"
        )
        if record.exc_info:
            line = f"{line} | EXC={self.formatException(record.exc_info)}"
        return line


def init_logging(level: int | str | None = None) -> None:
    """
    Initialize the package logger once with our StructuredFormatter.

    Call get_logger() from modules instead of calling logging.basicConfig()
    everywhere, so configuration stays central.
    """
    base = logging.getLogger("recipe_normalizer")
    if base.handlers:
        # Already configured: avoid double handlers in REPL / notebooks
        return

    if level is None:
        from recipe_normalizer.config import get_settings

        level = get_settings().log_level

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    base.addHandler(handler)
    base.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger configured with structured formatting.

    Usage:
        logger = get_logger("segmenter")
        logger.debug(
            "Something happened",
            extra={
                "invoking_func": "some_function",
                "invoking_purpose": "High-level purpose",
                "next_step": "What happens next",
                "resolution": "How to fix if error",
            },
        )
    """
    init_logging()
    return logging.getLogger(f"recipe_normalizer.{name}")
