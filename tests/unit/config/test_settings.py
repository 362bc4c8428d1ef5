# nosec B101


import logging

import pytest

from config.logging_config import JSONFormatter, configure_logging, time_operation
from config.settings import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.DATETIME_FORMAT == '%Y-%m-%dT%H:%M:%S%z'
    assert settings.QUERY_MARKER == 'EXCHANGE_RATE_REQUEST'
    assert settings.REQUIRE_QUERY_MARKER is True
    assert settings.SYNTHETIC_LINK_WEIGHT == 1.0
    assert settings.NO_RATE_PLACEHOLDER == 'NONE'


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('REQUIRE_QUERY_MARKER', 'false')
    monkeypatch.setenv('no_rate_placeholder', '0')

    settings = Settings(_env_file=None)

    assert settings.REQUIRE_QUERY_MARKER is False
    assert settings.NO_RATE_PLACEHOLDER == '0'


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_configure_logging_uses_stderr_and_file(restore_root_logger, tmp_path):
    log_file = tmp_path / 'logs' / 'app.log'

    configure_logging(level='debug', json_logs=True, log_file=str(log_file))

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 2
    assert all(isinstance(h.formatter, JSONFormatter) for h in restore_root_logger.handlers)
    assert log_file.parent.is_dir()


def test_json_formatter_includes_extra_data():
    record = logging.LogRecord('engine', logging.INFO, __file__, 1, 'hello %s', ('world',), None)
    record.extra_data = {'vertices': 4}

    output = JSONFormatter().format(record)

    assert '"message": "hello world"' in output
    assert '"data": {"vertices": 4}' in output


def test_time_operation_logs_duration(caplog):
    logger = logging.getLogger('tests.timing')

    with caplog.at_level(logging.DEBUG, logger='tests.timing'):
        with time_operation(logger, 'recompute'):
            pass

    assert 'recompute took' in caplog.text
