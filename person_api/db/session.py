# person_api/db/session.py
import logging

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.errors import PyMongoError

from person_api.core.config import Settings
from person_api.core.errors import StorageConfigurationError, StorageUnavailableError
from person_api.crud.person import MongoPersonStore

logger = logging.getLogger("persons.db")


# ----------------------------------------------------------------------
# Cliente assíncrono (uma instância por aplicação, criada no startup)
# ----------------------------------------------------------------------
def create_client(settings: Settings) -> AsyncMongoClient:
    if not settings.MONGO_URI:
        raise StorageConfigurationError("MONGO_URI não definida no ambiente/.env")

    return AsyncMongoClient(
        settings.MONGO_URI,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    )


# ----------------------------------------------------------------------
# Inicialização do banco (chamada no startup)
# ----------------------------------------------------------------------
async def init_db(client: AsyncMongoClient, settings: Settings) -> MongoPersonStore:
    """
    Confirma a conexão (ping) e garante os índices usados nas buscas
    por nome e por comida favorita.

    Qualquer falha aqui é fatal: a aplicação não sobe em modo degradado.
    """
    collection = client[settings.database_name][settings.MONGO_COLLECTION]
    try:
        await client.admin.command("ping")
        await collection.create_index([("name", ASCENDING)])
        await collection.create_index([("favoriteFoods", ASCENDING)])
    except PyMongoError as exc:
        raise StorageUnavailableError(
            f"Não foi possível conectar ao MongoDB: {exc}"
        ) from exc

    logger.info("Conectado ao MongoDB, banco de dados: %s", settings.database_name)
    return MongoPersonStore(collection)


async def connect(settings: Settings) -> tuple[AsyncMongoClient, MongoPersonStore]:
    client = create_client(settings)
    try:
        store = await init_db(client, settings)
    except StorageUnavailableError:
        await client.close()
        raise
    return client, store


async def close_client(client: AsyncMongoClient) -> None:
    await client.close()
    logger.info("Conexão com o MongoDB fechada")
