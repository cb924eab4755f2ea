from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from linkhub.models.link_model import LinkRecord


class StoreStatus(StrEnum):
    """Status of the most recent operation against the store."""

    IDLE = 'idle'
    LOADING = 'loading'
    ERROR = 'error'


@dataclass(frozen=True)
class StoreState:
    """Immutable snapshot of a LinkStore.

    Attributes:
        records (tuple[LinkRecord, ...]):
            Current page of links, in server order.
        total (int):
            Number of links matching the last query across all pages.
        status (StoreStatus):
            idle | loading | error
        last_error (Optional[str]):
            Human-readable message, only set when status is 'error'.
    """

    records: tuple[LinkRecord, ...] = field(default_factory=tuple)
    total: int = 0
    status: StoreStatus = StoreStatus.IDLE
    last_error: Optional[str] = None
