"""Structured logging for the store

The store logs through module-level loggers only (`logging.getLogger(__name__)`)
and passes context as camelCase `extra` keys. `initialize_logging()` routes
all of it to stdout as JSON lines, e.g.

    {"timestamp": "2025-12-26T12:00:00.000Z", "level": "WARNING",
     "logger": "linkhub.store.helpers", "message": "Skipping malformed link.",
     "index": 1, "reason": "KeyError('url')"}

`create_context()` calls it unless told not to; embedders with their own
logging setup should pass `configure_logging=False`.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkhub.utils.constants import LOG_LEVEL_ENV


# Attributes every LogRecord carries; anything else was passed via `extra`.
_RECORD_FIELDS = frozenset(logging.LogRecord('', logging.NOTSET, '', 0, '', None, None).__dict__) | {'message', 'asctime'}


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object: fixed fields, then its extras"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': _utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_FIELDS}
        for key, value in extras.items():
            entry.setdefault(key, value)

        # extras may hold datetimes, enums, exceptions
        return json.dumps(entry, default=str)


def initialize_logging() -> None:
    """Send every logger's output to stdout as JSON, at $LOG_LEVEL (default INFO)"""
    level = os.getenv(LOG_LEVEL_ENV, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'console': {'class': 'logging.StreamHandler', 'formatter': 'json', 'stream': 'ext://sys.stdout'},
            },
            'root': {'level': level, 'handlers': ['console']},
        }
    )
