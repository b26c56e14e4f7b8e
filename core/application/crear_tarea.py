import logging
from typing import Any

from core.application.operacion import operacion_de_almacenamiento
from core.application.validacion import validar_creacion
from core.domain.duracion import calcular_duracion
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class CrearTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, payload: Any) -> Tarea:
        cmd = validar_creacion(payload)
        with operacion_de_almacenamiento("CREAR TAREA", "Failed to create task"):
            tarea = self._repository.insert(
                title=cmd.title,
                description=cmd.description,
                time=cmd.time,
                duration=calcular_duracion(cmd.time),
            )
        logger.info(f"✅ Tarea {tarea.id} creada")
        return tarea
