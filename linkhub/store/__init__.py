from linkhub.store.link_store import LinkStore
from linkhub.store.helpers import WireShape, NormalizedList, normalize_list_payload, error_message, link_path


__all__ = [
    'LinkStore',
    'WireShape',
    'NormalizedList',
    'normalize_list_payload',
    'error_message',
    'link_path',
]
