from dataclasses import dataclass, fields
from typing import Any, Literal, Optional


SortOrder = Literal['asc', 'desc']


@dataclass(frozen=True)
class ListQuery:
    """Optional filter/sort/pagination parameters for listing links.

    Every field is optional; an unset field means "server default". Values
    are passed to the API client verbatim, the store does not validate them.

    Attributes:
        page (Optional[int]): 1-based page number.
        page_size (Optional[int]): records per page.
        sort_by (Optional[str]): field name, e.g. 'created_at' or 'slug'.
        sort_order (Optional[str]): 'asc' or 'desc'.
        keyword (Optional[str]): substring filter.
        is_active (Optional[bool]): tri-state activity filter.
    """

    page: Optional[int] = None
    page_size: Optional[int] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    keyword: Optional[str] = None
    is_active: Optional[bool] = None

    def to_params(self) -> dict[str, Any]:
        """Return the set fields as query parameters

        Example:
            >>> ListQuery(page=2, keyword='promo').to_params()
            {'page': 2, 'keyword': 'promo'}
        """
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass(frozen=True)
class LinkPatch:
    """Partial update of a link; unset fields stay unchanged server-side."""

    url: Optional[str] = None
    is_active: Optional[bool] = None

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.url is not None:
            body['url'] = self.url
        if self.is_active is not None:
            body['is_active'] = self.is_active
        return body
