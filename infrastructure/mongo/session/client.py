import logging
import os
import threading
from typing import Any

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from core.domain.errors import BaseDeDatosNoDisponible

logger = logging.getLogger(__name__)

_client: MongoClient[Any] | None = None

_coleccion_lock = threading.Lock()
_coleccion_inicializada = False


def get_client() -> MongoClient[Any]:
    """
    Obtiene el cliente de MongoDB (Singleton).
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        timeout_ms = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
        _client = MongoClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)
    return _client


def get_db() -> Database[Any]:
    """
    Obtiene la base de datos de MongoDB.

    Retorna:
        Database: La instancia de la base de datos de MongoDB.
    """
    client = get_client()
    db_name = os.getenv("MONGO_DB_NAME", "tareas")
    return client[db_name]


def get_collection() -> Collection[Any]:
    return get_db()[os.getenv("MONGO_COLLECTION", "tasks")]


def conectar() -> None:
    """
    Verifica la conexión con un ping antes de aceptar peticiones.

    Lanza:
        BaseDeDatosNoDisponible: si el servidor no responde dentro del
        timeout de selección configurado.
    """
    try:
        get_client().admin.command("ping")
    except PyMongoError as e:
        logger.error(f"🔴 Error de conexión con MongoDB: {e}")
        raise BaseDeDatosNoDisponible(str(e)) from e
    logger.info("🟢 MongoDB conectado")


def inicializar_coleccion() -> None:
    """
    Crea los índices de la colección una sola vez por proceso.

    Llamadas repetidas (recargas, varios arranques del lifespan) no hacen nada.
    """
    global _coleccion_inicializada
    with _coleccion_lock:
        if _coleccion_inicializada:
            return
        collection = get_collection()
        collection.create_index([("createdAt", DESCENDING)])
        collection.create_index([("status", ASCENDING), ("createdAt", DESCENDING)])
        _coleccion_inicializada = True
        logger.info(f"📦 Colección '{collection.name}' inicializada")


def cerrar() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
