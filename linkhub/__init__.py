from linkhub.models import LinkRecord, ListQuery, LinkPatch, StoreState, StoreStatus
from linkhub.store import LinkStore
from linkhub.context import AppContext, create_context


__all__ = [
    'LinkRecord',
    'ListQuery',
    'LinkPatch',
    'StoreState',
    'StoreStatus',
    'LinkStore',
    'AppContext',
    'create_context',
]
