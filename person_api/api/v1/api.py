# person_api/api/v1/api.py
from fastapi import APIRouter

from person_api.api.routes import persons

api_router = APIRouter()

# /persons/bulk, /persons/food/{food} e /persons/name/... não colidem com /persons/{id}
api_router.include_router(
    persons.router,
    prefix="/persons",
    tags=["persons"],
)
