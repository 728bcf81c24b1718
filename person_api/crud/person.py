# person_api/crud/person.py
import logging
from typing import List, Sequence

from pymongo import ASCENDING, ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from person_api.core.errors import Err, ErrorKind, Ok, PersonError, Result
from person_api.crud.base import (
    PersonStore,
    build_document,
    parse_object_id,
    utcnow,
    validate_age,
)
from person_api.schemas.person import DeleteManyResult, PersonCreate, PersonRead

logger = logging.getLogger("persons.store")

# "primeiro" registro = o mais antigo (ObjectId cresce com o tempo de criação)
INSERTION_ORDER = [("_id", ASCENDING)]


def _storage_error(operation: str, exc: PyMongoError) -> Err:
    logger.exception("Falha no MongoDB durante %s", operation)
    return Err(PersonError(ErrorKind.STORAGE, f"Storage error during {operation}: {exc}"))


class MongoPersonStore(PersonStore):
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def create(self, obj_in: PersonCreate) -> Result[PersonRead]:
        doc = build_document(obj_in, utcnow())
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as exc:
            return _storage_error("create", exc)
        doc["_id"] = result.inserted_id
        return Ok(PersonRead.from_document(doc))

    async def create_multi(
        self, objs_in: Sequence[PersonCreate]
    ) -> Result[List[PersonRead]]:
        if not objs_in:
            return Ok([])

        now = utcnow()
        docs = [build_document(obj_in, now) for obj_in in objs_in]
        try:
            result = await self.collection.insert_many(docs, ordered=True)
        except PyMongoError as exc:
            return _storage_error("bulk create", exc)

        for doc, inserted_id in zip(docs, result.inserted_ids):
            doc["_id"] = inserted_id
        return Ok([PersonRead.from_document(doc) for doc in docs])

    async def get_multi(self) -> Result[List[PersonRead]]:
        try:
            cursor = self.collection.find({}).sort(INSERTION_ORDER)
            docs = await cursor.to_list(None)
        except PyMongoError as exc:
            return _storage_error("list", exc)
        return Ok([PersonRead.from_document(doc) for doc in docs])

    async def get_by_food(self, food: str) -> Result[PersonRead]:
        try:
            doc = await self.collection.find_one(
                {"favoriteFoods": food}, sort=INSERTION_ORDER
            )
        except PyMongoError as exc:
            return _storage_error("find by food", exc)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(PersonRead.from_document(doc))

    async def get(self, id: str) -> Result[PersonRead]:
        oid = parse_object_id(id)
        if isinstance(oid, Err):
            return oid
        try:
            doc = await self.collection.find_one({"_id": oid.value})
        except PyMongoError as exc:
            return _storage_error("find by id", exc)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(PersonRead.from_document(doc))

    async def append_favorite_food(self, id: str, food: str) -> Result[PersonRead]:
        oid = parse_object_id(id)
        if isinstance(oid, Err):
            return oid
        try:
            # leitura + escrita numa única operação atômica no documento
            doc = await self.collection.find_one_and_update(
                {"_id": oid.value},
                {
                    "$push": {"favoriteFoods": food},
                    "$currentDate": {"updatedAt": True},
                },
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            return _storage_error("append favorite food", exc)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(PersonRead.from_document(doc))

    async def update_age_by_name(self, name: str, age: int) -> Result[PersonRead]:
        checked = validate_age(age)
        if isinstance(checked, Err):
            return checked
        try:
            doc = await self.collection.find_one_and_update(
                {"name": name},
                {
                    "$set": {"age": checked.value},
                    "$currentDate": {"updatedAt": True},
                },
                sort=INSERTION_ORDER,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            return _storage_error("update age", exc)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(PersonRead.from_document(doc))

    async def remove(self, id: str) -> Result[PersonRead]:
        oid = parse_object_id(id)
        if isinstance(oid, Err):
            return oid
        try:
            doc = await self.collection.find_one_and_delete({"_id": oid.value})
        except PyMongoError as exc:
            return _storage_error("delete by id", exc)
        if doc is None:
            return Err(PersonError.not_found())
        return Ok(PersonRead.from_document(doc))

    async def remove_by_name(self, name: str) -> Result[DeleteManyResult]:
        try:
            result = await self.collection.delete_many({"name": name})
        except PyMongoError as exc:
            return _storage_error("delete by name", exc)
        return Ok(
            DeleteManyResult(
                acknowledged=result.acknowledged,
                deleted_count=result.deleted_count,
            )
        )
