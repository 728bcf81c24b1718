# person_api/crud/__init__.py
from person_api.crud.base import PersonStore
from person_api.crud.memory import InMemoryPersonStore
from person_api.crud.person import MongoPersonStore

__all__ = [
    "PersonStore",
    "MongoPersonStore",
    "InMemoryPersonStore",
]
