from typing import Any, TypeAlias
from collections.abc import Callable

from linkhub.models.store_state import StoreState


# Type aliases for wire payloads
JsonObject: TypeAlias = dict[str, Any]
JsonPayload: TypeAlias = Any
QueryParams: TypeAlias = dict[str, Any]

# Observer callback receiving every new store snapshot
StateListener: TypeAlias = Callable[[StoreState], None]
Unsubscribe: TypeAlias = Callable[[], None]
