from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.tarea import EstadoTarea, Tarea


class TareaMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la base de datos.
    """

    id: str = Field(alias="_id")
    title: str
    description: str
    time: str
    duration: int
    created_at: int = Field(alias="createdAt")
    status: str = EstadoTarea.PENDIENTE.value

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_domain(self) -> Tarea:
        """
        Convierte el modelo de MongoDB al modelo de dominio.

        Retorna:
            Tarea: La entidad de dominio.
        """
        return Tarea(
            id=UUID(self.id),
            title=self.title,
            description=self.description,
            time=self.time,
            duration=self.duration,
            created_at=self.created_at,
            status=EstadoTarea(self.status),
        )

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TareaMongo":
        """
        Crea una instancia de TareaMongo a partir de una entidad de dominio.

        Argumentos:
            tarea (Tarea): La entidad de dominio.

        Retorna:
            TareaMongo: El modelo de MongoDB.
        """
        return cls(
            id=str(tarea.id),
            title=tarea.title,
            description=tarea.description,
            time=tarea.time,
            duration=tarea.duration,
            created_at=tarea.created_at,
            status=tarea.status.value,
        )
