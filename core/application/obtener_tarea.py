from typing import Any

from core.application.operacion import operacion_de_almacenamiento
from core.application.validacion import validar_id
from core.domain.errors import TareaNoEncontrada
from core.domain.models.tarea import Tarea
from core.domain.ports.tarea_repository import TareaRepository


class ObtenerTareaUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, tarea_id: Any) -> Tarea:
        uid = validar_id(tarea_id)
        with operacion_de_almacenamiento("OBTENER TAREA", "Failed to retrieve task"):
            tarea = self._repository.get(uid)
        if tarea is None:
            raise TareaNoEncontrada(uid)
        return tarea
