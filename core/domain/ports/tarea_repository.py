from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaRepository(ABC):
    """
    Puerto de persistencia de tareas.

    Los listados se devuelven ordenados por `created_at` descendente.
    `get`, `update` y `eliminar` devuelven None cuando el id no existe;
    la ausencia no es un error.
    """

    @abstractmethod
    def list_by_status(self, estado: EstadoTarea) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def get(self, tarea_id: UUID) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def insert(self, title: str, description: str, time: str, duration: int) -> Tarea:
        raise NotImplementedError

    @abstractmethod
    def update(self, tarea_id: UUID, cambios: dict[str, Any]) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, tarea_id: UUID) -> Tarea | None:
        raise NotImplementedError
