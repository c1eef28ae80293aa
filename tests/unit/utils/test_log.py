"""Unit tests for logging setup."""

import logging

from cmvn.utils.log import configure_logging
from rich.logging import RichHandler


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_default_level_is_warning(self) -> None:
        """Without verbose only warnings and above are shown."""
        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_verbose_enables_debug(self) -> None:
        """Verbose mode logs at DEBUG level."""
        configure_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_calls_replace_handler(self) -> None:
        """Configuring twice does not stack handlers."""
        configure_logging()
        configure_logging()

        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
