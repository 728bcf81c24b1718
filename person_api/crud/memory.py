# person_api/crud/memory.py
import copy
from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId

from person_api.core.errors import Err, Ok, PersonError, Result
from person_api.crud.base import (
    PersonStore,
    build_document,
    parse_object_id,
    utcnow,
    validate_age,
)
from person_api.schemas.person import DeleteManyResult, PersonCreate, PersonRead


class InMemoryPersonStore(PersonStore):
    """
    Store em memória com a mesma semântica do MongoPersonStore.

    Usado nos testes e para rodar a API localmente sem banco. Nenhuma operação
    tem ``await`` no meio, então cada uma é atômica dentro do event loop.
    """

    def __init__(self) -> None:
        # dict mantém a ordem de inserção
        self._docs: Dict[ObjectId, Dict[str, Any]] = {}

    def _read(self, doc: Dict[str, Any]) -> PersonRead:
        return PersonRead.from_document(copy.deepcopy(doc))

    def _first(self, **match: Any) -> Optional[Dict[str, Any]]:
        for doc in self._docs.values():
            if all(doc.get(key) == value for key, value in match.items()):
                return doc
        return None

    async def create(self, obj_in: PersonCreate) -> Result[PersonRead]:
        doc = build_document(obj_in, utcnow())
        doc["_id"] = ObjectId()
        self._docs[doc["_id"]] = doc
        return Ok(self._read(doc))

    async def create_multi(
        self, objs_in: Sequence[PersonCreate]
    ) -> Result[List[PersonRead]]:
        now = utcnow()
        docs = []
        for obj_in in objs_in:
            doc = build_document(obj_in, now)
            doc["_id"] = ObjectId()
            docs.append(doc)
        # tudo ou nada: os documentos só entram depois de todos montados
        for doc in docs:
            self._docs[doc["_id"]] = doc
        return Ok([self._read(doc) for doc in docs])

    async def get_multi(self) -> Result[List[PersonRead]]:
        return Ok([self._read(doc) for doc in self._docs.values()])

    async def get_by_food(self, food: str) -> Result[PersonRead]:
        for doc in self._docs.values():
            if food in doc.get("favoriteFoods", []):
                return Ok(self._read(doc))
        return Err(PersonError.not_found())

    async def get(self, id: str) -> Result[PersonRead]:
        oid = parse_object_id(id)
        if isinstance(oid, Err):
            return oid
        doc = self._docs.get(oid.value)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(self._read(doc))

    async def append_favorite_food(self, id: str, food: str) -> Result[PersonRead]:
        oid = parse_object_id(id)
        if isinstance(oid, Err):
            return oid
        doc = self._docs.get(oid.value)
        if doc is None:
            return Err(PersonError.not_found())
        doc.setdefault("favoriteFoods", []).append(food)
        doc["updatedAt"] = utcnow()
        return Ok(self._read(doc))

    async def update_age_by_name(self, name: str, age: int) -> Result[PersonRead]:
        checked = validate_age(age)
        if isinstance(checked, Err):
            return checked
        doc = self._first(name=name)
        if doc is None:
            return Err(PersonError.not_found())
        doc["age"] = checked.value
        doc["updatedAt"] = utcnow()
        return Ok(self._read(doc))

    async def remove(self, id: str) -> Result[PersonRead]:
        oid = parse_object_id(id)
        if isinstance(oid, Err):
            return oid
        doc = self._docs.pop(oid.value, None)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(self._read(doc))

    async def remove_by_name(self, name: str) -> Result[DeleteManyResult]:
        matching = [oid for oid, doc in self._docs.items() if doc.get("name") == name]
        for oid in matching:
            del self._docs[oid]
        return Ok(DeleteManyResult(acknowledged=True, deleted_count=len(matching)))
