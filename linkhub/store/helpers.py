"""Helpers for reconciling API responses with store state.

Functions:
    normalize_list_payload(payload) -> NormalizedList
        Accept both wire shapes of GET /links
    error_message(exc, fallback) -> str
        Derive a human-readable message from a collaborator failure
    link_path(slug) -> str
        Build the resource path of a single link

Example:
    >>> normalize_list_payload([{'id': 1, 'slug': 'a', 'url': 'https://a.example'}]).total
    1
    >>> normalize_list_payload({'links': [], 'total': 42}).total
    42
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any
from urllib.parse import quote

from linkhub.models import LinkRecord
from linkhub.utils.constants import LINKS_PATH


__all__ = ['WireShape', 'NormalizedList', 'normalize_list_payload', 'error_message', 'link_path']

logger = logging.getLogger(__name__)


class WireShape(StrEnum):
    CURRENT = 'current'  # {"links": [...], "total": n}
    LEGACY = 'legacy'  # bare array of links
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class NormalizedList:
    records: tuple[LinkRecord, ...] = field(default_factory=tuple)
    total: int = 0
    shape: WireShape = WireShape.UNKNOWN


def _parse_records(items: list[Any]) -> tuple[LinkRecord, ...]:
    records = []
    for index, item in enumerate(items):
        try:
            records.append(LinkRecord.from_dict(item))
        except (TypeError, KeyError, ValueError) as e:
            logger.warning('Skipping malformed link.', extra={'index': index, 'reason': repr(e)})
    return tuple(records)


def _parse_total(total: Any) -> int:
    if total is None:
        return 0
    if isinstance(total, int) and not isinstance(total, bool):
        return total
    if isinstance(total, float) and total.is_integer():
        return int(total)
    logger.warning('Ignoring non-integer list total.', extra={'total': repr(total)})
    return 0


def normalize_list_payload(payload: Any) -> NormalizedList:
    """Normalize a list response body into records and total

    Two wire shapes are accepted for the same endpoint while the backend
    migrates:
        - legacy: a bare array of links. The true total is unknown, so the
          number of parsed links is used.
        - current: {"links": [...], "total": n}. Missing 'links' means no
          records, a missing or non-integer 'total' means 0.

    Malformed link objects are skipped one by one; the rest of the page and
    the detected shape are kept. Only a body that is neither shape (or whose
    'links' is not an array) degrades to an empty result with shape UNKNOWN.
    Nothing here raises.

    Args:
        payload (Any):
            Decoded response body.

    Returns:
        NormalizedList: records, total and the detected wire shape.
    """
    if isinstance(payload, list):
        records = _parse_records(payload)
        return NormalizedList(records=records, total=len(records), shape=WireShape.LEGACY)

    if not isinstance(payload, dict):
        logger.warning('Unrecognized list payload.', extra={'payloadType': type(payload).__name__})
        return NormalizedList()

    links = payload.get('links')
    links = [] if links is None else links
    if not isinstance(links, list):
        logger.warning('Unrecognized list payload.', extra={'linksType': type(links).__name__})
        return NormalizedList()

    return NormalizedList(records=_parse_records(links), total=_parse_total(payload.get('total')), shape=WireShape.CURRENT)


def error_message(exc: BaseException, fallback: str) -> str:
    """Derive a human-readable message from a collaborator failure

    Preference order:
        1. `exc.message`, if present and non-empty
        2. the server's {"error": "..."} body, when attached as `exc.payload`
        3. str(exc), if non-empty
        4. fallback

    Example:
        >>> error_message(LinkNotFoundError('not found'), 'Failed to delete link')
        'not found'
        >>> error_message(ApiError(), 'Failed to delete link')
        'Failed to delete link'
    """
    message = getattr(exc, 'message', None)
    if isinstance(message, str) and message:
        return message

    payload = getattr(exc, 'payload', None)
    if isinstance(payload, dict):
        server_error = payload.get('error')
        if isinstance(server_error, str) and server_error:
            return server_error

    return str(exc) or fallback


def link_path(slug: str) -> str:
    """Return the resource path for a single link, e.g. '/links/promo'"""
    return f'{LINKS_PATH}/{quote(slug, safe="")}'
