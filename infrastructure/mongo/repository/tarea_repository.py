import time as _time
from typing import Any
from uuid import UUID, uuid4

from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.models.tarea import TareaMongo
from infrastructure.mongo.session.client import get_collection


def _ahora_ms() -> int:
    return int(_time.time() * 1000)


class MongoTareaRepository(TareaRepository):
    """
    Implementación de TareaRepository usando MongoDB (Synchronous).
    """

    def __init__(self) -> None:
        self.collection: Collection[Any] = get_collection()

    def _a_dominio(self, doc: dict[str, Any] | None) -> Tarea | None:
        if not doc:
            return None
        return TareaMongo(**doc).to_domain()

    def list_by_status(self, estado: EstadoTarea) -> list[Tarea]:
        """
        Lista las tareas con el estado indicado, las más recientes primero.

        Argumentos:
            estado (EstadoTarea): Estado por el que filtrar.
        """
        docs = self.collection.find({"status": estado.value}).sort("createdAt", DESCENDING)
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def list(self) -> list[Tarea]:
        """
        Lista todas las tareas, las más recientes primero.

        Retorna:
            list[Tarea]: Lista de todas las tareas.
        """
        docs = self.collection.find().sort("createdAt", DESCENDING)
        return [TareaMongo(**doc).to_domain() for doc in docs]

    def get(self, tarea_id: UUID) -> Tarea | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            tarea_id (UUID): El ID de la tarea.

        Retorna:
            Tarea | None: La tarea encontrada o None si no existe.
        """
        return self._a_dominio(self.collection.find_one({"_id": str(tarea_id)}))

    def insert(self, title: str, description: str, time: str, duration: int) -> Tarea:
        """
        Inserta una tarea nueva en estado `todo`.

        El id y `createdAt` los asigna el repositorio.
        """
        tarea = Tarea(
            id=uuid4(),
            title=title,
            description=description,
            time=time,
            duration=duration,
            created_at=_ahora_ms(),
            status=EstadoTarea.PENDIENTE,
        )
        self.collection.insert_one(TareaMongo.from_domain(tarea).model_dump(by_alias=True))
        return tarea

    def update(self, tarea_id: UUID, cambios: dict[str, Any]) -> Tarea | None:
        """
        Aplica un `$set` con los campos recibidos.

        Argumentos:
            tarea_id (UUID): El ID de la tarea.
            cambios (dict): Campos a modificar; `status` puede venir como EstadoTarea.

        Retorna:
            Tarea | None: La tarea tras la actualización o None si no existe.
        """
        # Mongo rechaza un $set vacío: sin cambios es una simple lectura.
        if not cambios:
            return self.get(tarea_id)

        documento = {
            campo: valor.value if isinstance(valor, EstadoTarea) else valor
            for campo, valor in cambios.items()
        }
        doc = self.collection.find_one_and_update(
            {"_id": str(tarea_id)},
            {"$set": documento},
            return_document=ReturnDocument.AFTER,
        )
        return self._a_dominio(doc)

    def eliminar(self, tarea_id: UUID) -> Tarea | None:
        """
        Elimina una tarea por su ID.

        Argumentos:
            tarea_id (UUID): El ID de la tarea a eliminar.

        Retorna:
            Tarea | None: La tarea tal como estaba antes de borrarla, o None.
        """
        return self._a_dominio(self.collection.find_one_and_delete({"_id": str(tarea_id)}))
