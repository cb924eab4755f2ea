import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


# Go marshals time.Time with up to nine fractional digits
_FRACTION_RE = re.compile(r'(\.\d{6})\d+')


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise TypeError(f'Expected RFC 3339 timestamp string, got {type(value).__name__}')
    return datetime.fromisoformat(_FRACTION_RE.sub(r'\1', value, count=1))


@dataclass(frozen=True)
class LinkRecord:
    """Represent one slug -> URL mapping as returned by the link service.

    Attributes:
        id (int | str):
            Opaque, server-assigned identifier.
        slug (str):
            Short-path token, unique among active links. Routing key for
            update and delete.
        url (str):
            Destination URL.
        is_active (bool):
            Inactive links are excluded from redirection (server-side).
        created_at (Optional[datetime]):
            Server-assigned creation time.
        updated_at (Optional[datetime]):
            Server-assigned time of the last edit.

    Example:
        >>> link = LinkRecord.from_dict({
        ...     'id': 1,
        ...     'slug': 'promo',
        ...     'url': 'https://example.com/promo',
        ...     'is_active': True,
        ...     'created_at': '2025-10-15T12:00:00Z',
        ...     'updated_at': '2025-10-15T12:00:00Z',
        ... })
        >>> link.slug
        'promo'
        >>> link.created_at.year
        2025
    """

    id: int | str
    slug: str
    url: str
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LinkRecord':
        """Parse a single wire object into a LinkRecord

        Args:
            data (dict[str, Any]):
                JSON object with at least 'id', 'slug' and 'url'.

        Returns:
            LinkRecord: parsed record.

        Raises:
            TypeError:
                If data is not a mapping or a field has the wrong type.
            KeyError:
                If a required field is missing.
            ValueError:
                If a timestamp cannot be parsed.
        """
        if not isinstance(data, dict):
            raise TypeError(f'Expected link object, got {type(data).__name__}')

        slug = data['slug']
        url = data['url']
        if not isinstance(slug, str) or not isinstance(url, str):
            raise TypeError("Link 'slug' and 'url' must be strings")

        is_active = data.get('is_active')
        is_active = True if is_active is None else is_active
        if not isinstance(is_active, bool):
            raise TypeError(f"Link 'is_active' must be a boolean, got {is_active!r}")

        return cls(
            id=data['id'],
            slug=slug,
            url=url,
            is_active=is_active,
            created_at=_parse_timestamp(data.get('created_at')),
            updated_at=_parse_timestamp(data.get('updated_at')),
        )
