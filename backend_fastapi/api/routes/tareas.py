from typing import Any

from fastapi import APIRouter, Body, Depends, status

from backend_fastapi.api.deps import (
    cambiar_estado_tarea_use_case,
    crear_tarea_use_case,
    editar_tarea_use_case,
    eliminar_tarea_use_case,
    listar_tareas_por_estado_use_case,
    listar_tareas_use_case,
    obtener_tarea_use_case,
)
from backend_fastapi.api.schemas import (
    ErrorValidacionResponse,
    MensajeResponse,
    TareaResponse,
)
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import CambiarEstadoTareaUseCase, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasPorEstadoUseCase, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase

router = APIRouter(prefix="/tasks", tags=["tasks"])

_RESPUESTA_400 = {400: {"model": ErrorValidacionResponse}}
_RESPUESTA_404 = {404: {"model": MensajeResponse}}
_RESPUESTA_500 = {500: {"model": MensajeResponse}}


@router.get(
    "",
    response_model=list[TareaResponse],
    responses={**_RESPUESTA_500},
    summary="Listar todas las tareas",
)
def listar_tareas(
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[TareaResponse]:
    """
    Obtiene todas las tareas, de la más reciente a la más antigua.
    """
    return [TareaResponse.from_domain(t) for t in use_case.execute()]


@router.get(
    "/status/{estado}",
    response_model=list[TareaResponse],
    responses={**_RESPUESTA_400, **_RESPUESTA_500},
    summary="Listar tareas por estado",
)
def listar_tareas_por_estado(
    estado: str,
    use_case: ListarTareasPorEstadoUseCase = Depends(listar_tareas_por_estado_use_case),
) -> list[TareaResponse]:
    """
    Obtiene las tareas con el estado indicado.

    - **estado**: `todo`, `inprogress` o `done`.
    """
    return [TareaResponse.from_domain(t) for t in use_case.execute(estado)]


@router.get(
    "/{tarea_id}",
    response_model=TareaResponse,
    responses={**_RESPUESTA_400, **_RESPUESTA_404, **_RESPUESTA_500},
    summary="Obtener una tarea",
)
def obtener_tarea(
    tarea_id: str,
    use_case: ObtenerTareaUseCase = Depends(obtener_tarea_use_case),
) -> TareaResponse:
    return TareaResponse.from_domain(use_case.execute(tarea_id))


@router.post(
    "",
    response_model=TareaResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_RESPUESTA_400, **_RESPUESTA_500},
    summary="Crear una nueva tarea",
)
def crear_tarea(
    payload: Any = Body(default=None),
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
) -> TareaResponse:
    """
    Crea una nueva tarea en estado `todo`.

    - **title**: Título de la tarea.
    - **description**: Descripción de la tarea.
    - **time**: Hora en formato HH:mm entre 00:00 y 06:00. La duración se calcula a partir de ella.
    """
    return TareaResponse.from_domain(use_case.execute(payload))


@router.put(
    "/{tarea_id}",
    response_model=TareaResponse,
    responses={**_RESPUESTA_400, **_RESPUESTA_404, **_RESPUESTA_500},
    summary="Editar una tarea existente",
)
def editar_tarea(
    tarea_id: str,
    payload: Any = Body(default=None),
    use_case: EditarTareaUseCase = Depends(editar_tarea_use_case),
) -> TareaResponse:
    """
    Modifica los campos enviados de una tarea existente.

    - **tarea_id**: UUID de la tarea a modificar.
    - **title**, **description**, **time**, **status**: todos opcionales.
    """
    return TareaResponse.from_domain(use_case.execute(tarea_id, payload))


@router.patch(
    "/{tarea_id}/status",
    response_model=TareaResponse,
    responses={**_RESPUESTA_400, **_RESPUESTA_404, **_RESPUESTA_500},
    summary="Cambiar el estado de una tarea",
)
def cambiar_estado_tarea(
    tarea_id: str,
    payload: Any = Body(default=None),
    use_case: CambiarEstadoTareaUseCase = Depends(cambiar_estado_tarea_use_case),
) -> TareaResponse:
    return TareaResponse.from_domain(use_case.execute(tarea_id, payload))


@router.delete(
    "/{tarea_id}",
    response_model=TareaResponse,
    responses={**_RESPUESTA_400, **_RESPUESTA_404, **_RESPUESTA_500},
    summary="Eliminar una tarea",
)
def eliminar_tarea(
    tarea_id: str,
    use_case: EliminarTareaUseCase = Depends(eliminar_tarea_use_case),
) -> TareaResponse:
    """
    Elimina una tarea del sistema y devuelve su último estado.

    - **tarea_id**: UUID de la tarea a eliminar.
    """
    return TareaResponse.from_domain(use_case.execute(tarea_id))
