# person_api/api/deps.py
from fastapi import Request

from person_api.crud.base import PersonStore


async def get_person_store(request: Request) -> PersonStore:
    # o store é criado no startup (ou injetado no create_app) e fica em app.state
    return request.app.state.person_store
