# person_api/schemas/person.py
from datetime import datetime
from typing import Annotated, Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]
PersonAge = Annotated[int, Field(ge=0, le=120)]


class PersonBase(BaseModel):
    # JSON usa camelCase (favoriteFoods, createdAt); aceita também snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    name: PersonName
    age: Optional[PersonAge] = None
    favorite_foods: List[str] = Field(default_factory=list)


class PersonCreate(PersonBase):
    pass


class PersonAgeUpdate(BaseModel):
    age: PersonAge


class PersonRead(PersonBase):
    id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "PersonRead":
        """
        Converte um documento do Mongo ({"_id": ObjectId, ...}) no schema de saída.
        """
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            age=doc.get("age"),
            favorite_foods=list(doc.get("favoriteFoods") or []),
            created_at=doc["createdAt"],
            updated_at=doc["updatedAt"],
        )


class DeleteManyResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int
