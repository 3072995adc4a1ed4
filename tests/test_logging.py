"""Tests for structured logging of library events."""

from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest
import structlog
from structlog.testing import capture_logs

import optres._config as config_module
from optres import Err, Ok, configure, result, safe
from optres._logging import LIBRARY_LOGGER, configure_logging, get_logger


class TestLibraryEvents:
    """Decorators emit debug events."""

    def test_safe_logs_captured_exception(self) -> None:
        @safe
        def boom() -> int:
            raise ValueError('nope')

        with capture_logs() as logs:
            assert boom().is_err()

        assert logs == [
            {
                'event': 'exception_captured',
                'function': boom.__qualname__,
                'error_type': 'ValueError',
                'log_level': 'debug',
            }
        ]

    def test_safe_success_is_silent(self) -> None:
        @safe
        def fine() -> int:
            return 1

        with capture_logs() as logs:
            assert fine() == Ok(1)
        assert logs == []

    def test_result_logs_propagation(self) -> None:
        @result
        def bails():
            Err('x').bail()
            return Ok(1)

        with capture_logs() as logs:
            assert bails() == Err('x')
        assert [entry['event'] for entry in logs] == ['propagate_caught']

    def test_safe_logs_propagation(self) -> None:
        @safe
        def bails() -> int:
            return Err('x').bail()

        with capture_logs() as logs:
            assert bails() == Err('x')
        assert [entry['event'] for entry in logs] == ['propagate_caught']


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture(autouse=True)
    def restore_logging(self):
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        saved = (library_logger.level, library_logger.propagate, library_logger.handlers[:])
        structlog.reset_defaults()
        yield
        structlog.reset_defaults()
        library_logger.setLevel(saved[0])
        library_logger.propagate = saved[1]
        library_logger.handlers[:] = saved[2]

    def test_sets_library_level_and_handler(self) -> None:
        handler = configure_logging('DEBUG', json_output=True)
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        assert library_logger.level == logging.DEBUG
        assert library_logger.handlers == [handler]
        assert library_logger.propagate is False
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_reconfigure_replaces_own_handler(self) -> None:
        configure_logging('DEBUG')
        handler = configure_logging('WARNING')
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        assert library_logger.handlers == [handler]
        assert library_logger.level == logging.WARNING

    def test_root_logger_untouched(self) -> None:
        """A host's root handlers and level survive configure(log_level=...)."""
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root_level = root.level
        try:
            with patch.object(config_module, '_config', None):
                configure(log_level='DEBUG')
            assert host_handler in root.handlers
            assert root.level == root_level
            assert not any(isinstance(h.formatter, structlog.stdlib.ProcessorFormatter) for h in root.handlers)
        finally:
            root.removeHandler(host_handler)

    def test_json_output(self) -> None:
        stream = io.StringIO()
        configure_logging('DEBUG', json_output=True, stream=stream)
        get_logger('optres.test').info('hello', answer=42)
        out = stream.getvalue()
        assert '"event": "hello"' in out
        assert '"answer": 42' in out

    def test_host_structlog_config_kept(self) -> None:
        """An existing structlog configuration is not overwritten."""
        structlog.configure(processors=[structlog.processors.JSONRenderer()])
        configure_logging('DEBUG')
        assert structlog.get_config()['processors'][0].__class__ is structlog.processors.JSONRenderer

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging('chatty')
        assert logging.getLogger(LIBRARY_LOGGER).level == logging.INFO
