from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import CambiarEstadoTareaUseCase, EditarTareaUseCase
from core.application.eliminar_tarea import EliminarTareaUseCase
from core.application.listar_tareas import ListarTareasPorEstadoUseCase, ListarTareasUseCase
from core.application.obtener_tarea import ObtenerTareaUseCase
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.mongo.repository.tarea_repository import MongoTareaRepository


def get_tarea_repository() -> TareaRepository:
    # El cliente de Mongo es compartido; el repositorio es liviano.
    return MongoTareaRepository()


def get_crear_tarea_use_case(repository: TareaRepository) -> CrearTareaUseCase:
    return CrearTareaUseCase(repository=repository)


def get_editar_tarea_use_case(repository: TareaRepository) -> EditarTareaUseCase:
    return EditarTareaUseCase(repository=repository)


def get_cambiar_estado_tarea_use_case(
    repository: TareaRepository,
) -> CambiarEstadoTareaUseCase:
    return CambiarEstadoTareaUseCase(repository=repository)


def get_eliminar_tarea_use_case(repository: TareaRepository) -> EliminarTareaUseCase:
    return EliminarTareaUseCase(repository=repository)


def get_listar_tareas_use_case(repository: TareaRepository) -> ListarTareasUseCase:
    return ListarTareasUseCase(repository=repository)


def get_listar_tareas_por_estado_use_case(
    repository: TareaRepository,
) -> ListarTareasPorEstadoUseCase:
    return ListarTareasPorEstadoUseCase(repository=repository)


def get_obtener_tarea_use_case(repository: TareaRepository) -> ObtenerTareaUseCase:
    return ObtenerTareaUseCase(repository=repository)
