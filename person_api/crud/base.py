# person_api/crud/base.py
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from bson import ObjectId
from pydantic import ValidationError

from person_api.core.errors import Err, ErrorKind, Ok, PersonError, Result
from person_api.schemas.person import (
    DeleteManyResult,
    PersonAgeUpdate,
    PersonCreate,
    PersonRead,
)


def utcnow() -> datetime:
    # o Mongo guarda datas com precisão de milissegundos
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(value: str) -> Result[ObjectId]:
    if not ObjectId.is_valid(value):
        return Err(PersonError.malformed_id(value))
    return Ok(ObjectId(value))


def validate_age(age: Any) -> Result[int]:
    try:
        return Ok(PersonAgeUpdate(age=age).age)
    except ValidationError as exc:
        return Err(PersonError(ErrorKind.VALIDATION, _validation_message(exc)))


def build_document(obj_in: PersonCreate, now: datetime) -> Dict[str, Any]:
    """
    Monta o documento a ser gravado a partir do schema de entrada.

    ``age`` ausente/None não é gravado; ``favoriteFoods`` sempre é uma lista.
    Os timestamps vêm do store, nunca do cliente.
    """
    doc: Dict[str, Any] = {
        "name": obj_in.name,
        "favoriteFoods": list(obj_in.favorite_foods),
        "createdAt": now,
        "updatedAt": now,
    }
    if obj_in.age is not None:
        doc["age"] = obj_in.age
    return doc


def _validation_message(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


class PersonStore(ABC):
    """
    Contrato do armazenamento de Person.

    Todas as operações devolvem ``Ok``/``Err``; falhas esperadas (id malformado,
    registro inexistente, erro do banco) nunca sobem como exceção.
    """

    @abstractmethod
    async def create(self, obj_in: PersonCreate) -> Result[PersonRead]:
        ...

    @abstractmethod
    async def create_multi(
        self, objs_in: Sequence[PersonCreate]
    ) -> Result[List[PersonRead]]:
        ...

    @abstractmethod
    async def get_multi(self) -> Result[List[PersonRead]]:
        ...

    @abstractmethod
    async def get_by_food(self, food: str) -> Result[PersonRead]:
        ...

    @abstractmethod
    async def get(self, id: str) -> Result[PersonRead]:
        ...

    @abstractmethod
    async def append_favorite_food(self, id: str, food: str) -> Result[PersonRead]:
        ...

    @abstractmethod
    async def update_age_by_name(self, name: str, age: int) -> Result[PersonRead]:
        """Atualiza só o primeiro registro (ordem de inserção) com esse nome."""

    @abstractmethod
    async def remove(self, id: str) -> Result[PersonRead]:
        ...

    @abstractmethod
    async def remove_by_name(self, name: str) -> Result[DeleteManyResult]:
        ...

    async def close(self) -> None:
        return None
