from typing import Optional, Union
from uuid import UUID


def parse_id(value: Union[str, UUID]) -> Optional[UUID]:
    """Coerce a path identifier to a UUID, or None when it cannot name a record."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None
