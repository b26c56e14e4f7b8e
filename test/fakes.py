from itertools import count
from typing import Any
from uuid import UUID, uuid4

from core.domain.models.tarea import EstadoTarea, Tarea
from core.domain.ports.tarea_repository import TareaRepository


class InMemoryTareaRepository(TareaRepository):
    """
    Repositorio en memoria para tests.

    `created_at` sale de un contador para que el orden sea determinista.
    """

    def __init__(self, inicio_ms: int = 1_700_000_000_000) -> None:
        self._data: dict[UUID, Tarea] = {}
        self._reloj = count(inicio_ms)
        self.llamadas: list[str] = []

    def _ordenadas(self, tareas: Any) -> Any:
        return sorted(tareas, key=lambda t: t.created_at, reverse=True)

    def list_by_status(self, estado: EstadoTarea) -> list[Tarea]:
        self.llamadas.append("list_by_status")
        return self._ordenadas(t for t in self._data.values() if t.status == estado)

    def list(self) -> list[Tarea]:
        self.llamadas.append("list")
        return self._ordenadas(self._data.values())

    def get(self, tarea_id: UUID) -> Tarea | None:
        self.llamadas.append("get")
        return self._data.get(tarea_id)

    def insert(self, title: str, description: str, time: str, duration: int) -> Tarea:
        self.llamadas.append("insert")
        tarea = Tarea(
            id=uuid4(),
            title=title,
            description=description,
            time=time,
            duration=duration,
            created_at=next(self._reloj),
        )
        self._data[tarea.id] = tarea
        return tarea

    def update(self, tarea_id: UUID, cambios: dict[str, Any]) -> Tarea | None:
        self.llamadas.append("update")
        tarea = self._data.get(tarea_id)
        if tarea is None:
            return None
        for campo, valor in cambios.items():
            setattr(tarea, campo, valor)
        return tarea

    def eliminar(self, tarea_id: UUID) -> Tarea | None:
        self.llamadas.append("eliminar")
        return self._data.pop(tarea_id, None)


class RepositorioCaido(TareaRepository):
    """Todas las operaciones fallan como si Mongo no respondiera."""

    def _falla(self) -> Any:
        raise ConnectionError("MongoDB no responde")

    def list_by_status(self, estado: EstadoTarea) -> list[Tarea]:
        return self._falla()

    def list(self) -> list[Tarea]:
        return self._falla()

    def get(self, tarea_id: UUID) -> Tarea | None:
        return self._falla()

    def insert(self, title: str, description: str, time: str, duration: int) -> Tarea:
        return self._falla()

    def update(self, tarea_id: UUID, cambios: dict[str, Any]) -> Tarea | None:
        return self._falla()

    def eliminar(self, tarea_id: UUID) -> Tarea | None:
        return self._falla()
