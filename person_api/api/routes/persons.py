# person_api/api/routes/persons.py
from typing import List, TypeVar

from fastapi import APIRouter, Depends, status

from person_api.api.deps import get_person_store
from person_api.api.error_handlers import PersonHTTPException
from person_api.core.errors import Err, Result
from person_api.crud.base import PersonStore
from person_api.schemas import DeleteManyResult, PersonAgeUpdate, PersonCreate, PersonRead

T = TypeVar("T")

FAVORITE_FOOD = "hamburger"
BULK_DELETE_NAME = "Mary"

router = APIRouter()


def _unwrap(result: Result[T]) -> T:
    if isinstance(result, Err):
        raise PersonHTTPException(result.error)
    return result.value


# =========================
# CREATE
# =========================


@router.post(
    "",
    response_model=PersonRead,
    status_code=status.HTTP_201_CREATED,
    summary="Cria uma pessoa",
)
async def create_person(
    person_in: PersonCreate,
    store: PersonStore = Depends(get_person_store),
):
    return _unwrap(await store.create(person_in))


@router.post(
    "/bulk",
    response_model=List[PersonRead],
    status_code=status.HTTP_201_CREATED,
    summary="Cria várias pessoas numa única escrita",
)
async def create_people(
    people_in: List[PersonCreate],
    store: PersonStore = Depends(get_person_store),
):
    # o body inteiro é validado antes: um elemento inválido derruba o lote todo
    return _unwrap(await store.create_multi(people_in))


# =========================
# READ
# =========================


@router.get("", response_model=List[PersonRead], summary="Lista todas as pessoas")
async def list_people(store: PersonStore = Depends(get_person_store)):
    return _unwrap(await store.get_multi())


@router.get(
    "/food/{food}",
    response_model=PersonRead,
    summary="Primeira pessoa que tem a comida entre as favoritas",
)
async def get_person_by_food(
    food: str,
    store: PersonStore = Depends(get_person_store),
):
    return _unwrap(await store.get_by_food(food))


@router.get("/{person_id}", response_model=PersonRead, summary="Busca por id")
async def get_person(
    person_id: str,
    store: PersonStore = Depends(get_person_store),
):
    return _unwrap(await store.get(person_id))


# =========================
# UPDATE
# =========================


@router.put(
    "/{person_id}/favorite",
    response_model=PersonRead,
    summary='Adiciona "hamburger" às comidas favoritas',
)
async def add_favorite_food(
    person_id: str,
    store: PersonStore = Depends(get_person_store),
):
    return _unwrap(await store.append_favorite_food(person_id, FAVORITE_FOOD))


@router.put(
    "/name/{name}/age",
    response_model=PersonRead,
    summary="Atualiza a idade da primeira pessoa com esse nome",
)
async def update_age_by_name(
    name: str,
    age_in: PersonAgeUpdate,
    store: PersonStore = Depends(get_person_store),
):
    return _unwrap(await store.update_age_by_name(name, age_in.age))


# =========================
# DELETE
# =========================


@router.delete(
    "/name/mary",
    response_model=DeleteManyResult,
    summary='Remove todas as pessoas chamadas "Mary"',
)
async def delete_people_named_mary(store: PersonStore = Depends(get_person_store)):
    return _unwrap(await store.remove_by_name(BULK_DELETE_NAME))


@router.delete("/{person_id}", response_model=PersonRead, summary="Remove por id")
async def delete_person(
    person_id: str,
    store: PersonStore = Depends(get_person_store),
):
    return _unwrap(await store.remove(person_id))
