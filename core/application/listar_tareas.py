import logging
from typing import Any

from core.application.operacion import operacion_de_almacenamiento
from core.application.validacion import validar_estado_filtro
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class ListarTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Tarea]:
        with operacion_de_almacenamiento("LISTAR TAREAS", "Failed to retrieve tasks"):
            return self._repository.list()


class ListarTareasPorEstadoUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, status: Any) -> list[Tarea]:
        # Un estado fuera del enum nunca llega al repositorio.
        estado = validar_estado_filtro(status)
        logger.debug(f"📋 Listando tareas con estado {estado.value}")
        with operacion_de_almacenamiento(
            "LISTAR TAREAS POR ESTADO", "Failed to retrieve tasks by status"
        ):
            return self._repository.list_by_status(estado)
