from linkhub.models.link_model import LinkRecord
from linkhub.models.list_query import ListQuery, LinkPatch, SortOrder
from linkhub.models.store_state import StoreState, StoreStatus


__all__ = [
    'LinkRecord',
    'ListQuery',
    'LinkPatch',
    'SortOrder',
    'StoreState',
    'StoreStatus',
]
