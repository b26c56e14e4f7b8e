from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class EstadoTarea(Enum):
    PENDIENTE = "todo"
    EN_PROGRESO = "inprogress"
    COMPLETADA = "done"


@dataclass(slots=True)
class Tarea:
    id: UUID
    title: str
    description: str
    time: str
    duration: int
    created_at: int
    status: EstadoTarea = EstadoTarea.PENDIENTE
