"""Unit tests for logging utilities in logging.py

Test coverage includes:

1. JsonFormatter output
   - Ensures standard fields and UTC millisecond timestamps.
   - Ensures `extra` fields are attached without overriding fixed fields.
   - Ensures exception tracebacks are included.

2. initialize_logging() configuration
"""

import json
import logging

import pytest
from freezegun import freeze_time

from linkhub.utils.logging import JsonFormatter, initialize_logging
from linkhub.utils.constants import LOG_LEVEL_ENV


def make_record(msg='Received legacy list payload.', level=logging.WARNING, exc_info=None, **extra):
    record = logging.LogRecord('linkhub.store.link_store', level, __file__, 1, msg, None, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after initialize_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


# -------------------------------
# 1. JsonFormatter output
# -------------------------------


@freeze_time('2025-12-26T12:00:00Z')
def test_json_formatter_standard_fields():
    log = json.loads(JsonFormatter().format(make_record()))

    assert log == {
        'timestamp': '2025-12-26T12:00:00.000Z',
        'level': 'WARNING',
        'logger': 'linkhub.store.link_store',
        'message': 'Received legacy list payload.',
    }


def test_json_formatter_includes_extra():
    log = json.loads(JsonFormatter().format(make_record(recordCount=2, legacyPayloadsSeen=1)))

    assert log['recordCount'] == 2
    assert log['legacyPayloadsSeen'] == 1


def test_json_formatter_serializes_unknown_types():
    log = json.loads(JsonFormatter().format(make_record(query={'page': 1}, status=object())))

    assert log['query'] == {'page': 1}
    assert isinstance(log['status'], str)


def test_json_formatter_extras_do_not_override_fixed_fields():
    log = json.loads(JsonFormatter().format(make_record(level='debug', index=3)))

    assert log['level'] == 'WARNING'
    assert log['index'] == 3


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('connection refused')
    except RuntimeError:
        import sys

        record = make_record('Failed to fetch links.', exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['message'] == 'Failed to fetch links.'
    assert 'RuntimeError: connection refused' in log['exception']


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.mark.parametrize('env_level, expected', [(None, logging.INFO), ('debug', logging.DEBUG), ('WARNING', logging.WARNING)])
def test_initialize_logging(monkeypatch, restore_root_logger, env_level, expected):
    if env_level is None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    else:
        monkeypatch.setenv(LOG_LEVEL_ENV, env_level)

    initialize_logging()

    root = restore_root_logger
    assert root.level == expected
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)
