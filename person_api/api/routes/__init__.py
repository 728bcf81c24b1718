from person_api.api.routes import persons

__all__ = [
    "persons",
]
