from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaResponse(BaseModel):
    """Representación JSON de una tarea."""

    id: UUID
    title: str
    description: str
    time: str
    duration: int
    created_at: int = Field(serialization_alias="createdAt")
    status: EstadoTarea

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaResponse":
        return cls(
            id=tarea.id,
            title=tarea.title,
            description=tarea.description,
            time=tarea.time,
            duration=tarea.duration,
            created_at=tarea.created_at,
            status=tarea.status,
        )


class MensajeResponse(BaseModel):
    message: str


class ErrorValidacionResponse(MensajeResponse):
    errors: list[str] = []
