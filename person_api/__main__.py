# person_api/__main__.py
import logging

import uvicorn

from person_api.core.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("persons.main").info(
        "API disponível em http://%s:%s%s/persons",
        settings.HOST,
        settings.PORT,
        settings.API_PREFIX,
    )
    # uvicorn trata SIGINT/SIGTERM e roda o shutdown do lifespan (fecha o Mongo)
    uvicorn.run("person_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
