# person_api/schemas/__init__.py
from person_api.schemas.person import (
    DeleteManyResult,
    PersonAgeUpdate,
    PersonBase,
    PersonCreate,
    PersonRead,
)

__all__ = [
    "PersonBase",
    "PersonCreate",
    "PersonAgeUpdate",
    "PersonRead",
    "DeleteManyResult",
]
