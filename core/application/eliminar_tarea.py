import logging
from typing import Any

from core.application.operacion import operacion_de_almacenamiento
from core.application.validacion import validar_id
from core.domain.errors import TareaNoEncontrada
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class EliminarTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, tarea_id: Any) -> Tarea:
        uid = validar_id(tarea_id)
        with operacion_de_almacenamiento("ELIMINAR TAREA", "Failed to delete task"):
            tarea = self._repository.eliminar(uid)
        if tarea is None:
            raise TareaNoEncontrada(uid)

        logger.info(f"🗑️ Tarea {uid} eliminada")
        return tarea
