import logging

import pytest

from docintel.logging.logger import Log


class TestLog:
    def test_appends_context_as_key_value_pairs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="docintel"):
            Log.info("Analysis complete", provider="gemini", elapsed_ms=12)
        assert "Analysis complete provider=gemini elapsed_ms=12" in caplog.messages

    def test_message_without_context_is_unchanged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="docintel"):
            Log.warning("All providers failed")
        assert caplog.messages == ["All providers failed"]

    def test_levels_are_routed(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="docintel"):
            Log.debug("d")
            Log.error("e", code=1)
        levels = [record.levelname for record in caplog.records]
        assert levels == ["DEBUG", "ERROR"]

    def test_configure_sets_level_and_single_handler(self) -> None:
        logger = logging.getLogger("docintel")
        previous = logger.level
        try:
            Log.configure("warning")
            Log.configure("warning")
            assert logger.level == logging.WARNING
            assert len(logger.handlers) == 1
        finally:
            logger.setLevel(previous)
