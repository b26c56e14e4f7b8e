from fastapi import Depends

from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import CambiarEstadoTareaUseCase, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasPorEstadoUseCase, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.container import (
    get_cambiar_estado_tarea_use_case,
    get_crear_tarea_use_case,
    get_editar_tarea_use_case,
    get_eliminar_tarea_use_case,
    get_listar_tareas_por_estado_use_case,
    get_listar_tareas_use_case,
    get_obtener_tarea_use_case,
    get_tarea_repository,
)


def tarea_repository() -> TareaRepository:
    return get_tarea_repository()


def crear_tarea_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> CrearTareaUseCase:
    return get_crear_tarea_use_case(repository)


def editar_tarea_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> EditarTareaUseCase:
    return get_editar_tarea_use_case(repository)


def cambiar_estado_tarea_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> CambiarEstadoTareaUseCase:
    return get_cambiar_estado_tarea_use_case(repository)


def eliminar_tarea_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> EliminarTareaUseCase:
    return get_eliminar_tarea_use_case(repository)


def listar_tareas_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> ListarTareasUseCase:
    return get_listar_tareas_use_case(repository)


def listar_tareas_por_estado_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> ListarTareasPorEstadoUseCase:
    return get_listar_tareas_por_estado_use_case(repository)


def obtener_tarea_use_case(
    repository: TareaRepository = Depends(tarea_repository),
) -> ObtenerTareaUseCase:
    return get_obtener_tarea_use_case(repository)
