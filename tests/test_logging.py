"""Tests for the PprintLogger and setup_logging functionality.

This module verifies:
- PprintLogger formats dicts with pprint and Pydantic models as JSON
- pprint=False and plain strings use simple string conversion
- Delegation to the underlying logger works
- setup_logging names the logger after the calling module and attaches a
  single handler without overriding a level that is already set
"""

import logging
from io import StringIO

from drugdb.entity import Drug
from drugdb.loader import LoadResult
from drugdb.logging import PprintLogger, setup_logging


def capture(name: str) -> tuple[PprintLogger, StringIO]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return PprintLogger(logger), stream


class TestPprintLogger:
    """Tests for PprintLogger formatting and delegation."""

    def test_pprint_formats_dict(self) -> None:
        pprint_logger, stream = capture("test_pprint_dict")

        pprint_logger.info({"DB00001": "avoid concurrent use", "DB00002": {"nested": "data"}})

        output = stream.getvalue()
        assert "DB00001" in output
        assert "nested" in output
        assert "{" in output

    def test_plain_string_unchanged(self) -> None:
        """Strings are not wrapped in quotes by pformat."""
        pprint_logger, stream = capture("test_pprint_string")

        pprint_logger.info("Loading drugs from drugs.txt")

        assert "INFO - Loading drugs from drugs.txt\n" == stream.getvalue()

    def test_pydantic_model_uses_model_dump_json(self) -> None:
        pprint_logger, stream = capture("test_pprint_model")
        result = LoadResult(source="drugs.txt", drugs_loaded=2, lines_read=2, interactions_resolved=1)

        pprint_logger.info(result)

        output = stream.getvalue()
        assert '"source": "drugs.txt"' in output
        assert '"drugs_loaded": 2' in output

    def test_pydantic_model_with_pprint_false(self) -> None:
        pprint_logger, stream = capture("test_pprint_false")

        pprint_logger.info(Drug(drug_id="DB00001", name="Lepirudin"), pprint=False)

        output = stream.getvalue()
        assert "Lepirudin" in output
        assert '"name"' not in output

    def test_all_log_levels(self) -> None:
        pprint_logger, stream = capture("test_all_levels")
        data = {"level": "test"}

        pprint_logger.debug(data)
        pprint_logger.info(data)
        pprint_logger.warning(data)
        pprint_logger.error(data)

        output = stream.getvalue()
        for level in ("DEBUG", "INFO", "WARNING", "ERROR"):
            assert level in output

    def test_exception_logging(self) -> None:
        pprint_logger, stream = capture("test_exception")

        try:
            raise ValueError("Test exception")
        except ValueError:
            pprint_logger.exception({"error": "details"})

        output = stream.getvalue()
        assert "details" in output
        assert "Test exception" in output

    def test_delegates_to_underlying_logger(self) -> None:
        logger = logging.getLogger("test_delegation")
        pprint_logger = PprintLogger(logger)

        pprint_logger.setLevel(logging.WARNING)

        assert logger.level == logging.WARNING
        assert pprint_logger.handlers == logger.handlers


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_returns_pprint_logger(self) -> None:
        assert isinstance(setup_logging(), PprintLogger)

    def test_uses_caller_module_name(self) -> None:
        logger = setup_logging()

        assert logger.name == __name__

    def test_explicit_name_and_level(self) -> None:
        logger = setup_logging(level=logging.DEBUG, name="drugdb.test_explicit")

        assert logger.name == "drugdb.test_explicit"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_does_not_duplicate_handlers(self) -> None:
        logger1 = setup_logging(name="drugdb.test_duplicates")
        logger2 = setup_logging(name="drugdb.test_duplicates")

        assert logger1._logger is logger2._logger  # pylint: disable=protected-access
        assert len(logger1.handlers) == 1

    def test_existing_level_is_not_reset(self) -> None:
        """A level chosen by the application survives later setup_logging calls."""
        logger = setup_logging(name="drugdb.test_keep_level")
        logger.setLevel(logging.DEBUG)

        again = setup_logging(name="drugdb.test_keep_level")

        assert again.level == logging.DEBUG

    def test_level_set_before_first_use_is_kept(self) -> None:
        logging.getLogger("drugdb.test_preset_level").setLevel(logging.DEBUG)

        logger = setup_logging(name="drugdb.test_preset_level")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
