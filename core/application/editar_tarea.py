import logging
from typing import Any

from core.application.operacion import operacion_de_almacenamiento
from core.application.validacion import (
    validar_cambio_estado,
    validar_edicion,
    validar_en_conjunto,
    validar_id,
)
from core.domain.duracion import calcular_duracion
from core.domain.errors import TareaNoEncontrada
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


class EditarTareaUseCase:
    """
    Actualización parcial de una tarea.

    Solo se escriben los campos presentes en el payload. `duration` se
    recalcula únicamente si llega `time`; un payload vacío no modifica nada
    y devuelve la tarea tal cual está.
    """

    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, tarea_id: Any, payload: Any) -> Tarea:
        uid, cmd = validar_en_conjunto(
            lambda: validar_id(tarea_id),
            lambda: validar_edicion(payload),
        )
        cambios = cmd.cambios()
        if "time" in cambios:
            cambios["duration"] = calcular_duracion(cambios["time"])

        with operacion_de_almacenamiento("EDITAR TAREA", "Failed to update task"):
            tarea = self._repository.update(uid, cambios)
        if tarea is None:
            raise TareaNoEncontrada(uid)

        logger.info(f"✏️ Tarea {uid} actualizada ({', '.join(cambios) or 'sin cambios'})")
        return tarea


class CambiarEstadoTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, tarea_id: Any, payload: Any) -> Tarea:
        uid, cmd = validar_en_conjunto(
            lambda: validar_id(tarea_id),
            lambda: validar_cambio_estado(payload),
        )
        with operacion_de_almacenamiento(
            "CAMBIAR ESTADO TAREA", "Failed to update task status"
        ):
            tarea = self._repository.update(uid, {"status": cmd.status})
        if tarea is None:
            raise TareaNoEncontrada(uid)

        logger.info(f"🔄 Tarea {uid} → {cmd.status.value}")
        return tarea
