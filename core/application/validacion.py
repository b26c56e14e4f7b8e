"""
Validación de identificadores y payloads de tareas.

Funciones puras: no tocan el repositorio. Todas lanzan `ValidacionFallida`
con un mensaje por campo ("ruta.del.campo: descripción") y reportan todos
los errores de una sola pasada.
"""

import re
from typing import Annotated, Any, Callable
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from core.domain.errors import ValidacionFallida
from core.domain.models.tarea import EstadoTarea

MENSAJE_ID_INVALIDO = "Invalid task ID"
MENSAJE_ESTADO_INVALIDO = 'Status must be "todo", "inprogress", or "done"'

_PATRON_HORA = re.compile(r"0?([0-6]):([0-5][0-9])")

TextoNoVacio = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _validar_hora(valor: str) -> str:
    match = _PATRON_HORA.fullmatch(valor)
    if match is None:
        raise PydanticCustomError("time_format", "Time must be in HH:mm format")
    horas, minutos = int(match.group(1)), int(match.group(2))
    if horas == 6 and minutos != 0:
        raise PydanticCustomError("time_window", "Time must be between 00:00 and 06:00")
    return valor


class CrearTareaCommand(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: TextoNoVacio
    description: TextoNoVacio
    time: str

    @field_validator("time")
    @classmethod
    def hora_en_ventana(cls, valor: str) -> str:
        return _validar_hora(valor)


class EditarTareaCommand(BaseModel):
    """Actualización parcial: solo los campos presentes se aplican."""

    model_config = ConfigDict(extra="ignore")

    title: TextoNoVacio | None = None
    description: TextoNoVacio | None = None
    time: str | None = None
    status: EstadoTarea | None = None

    @field_validator("title", "description", "time", "status", mode="before")
    @classmethod
    def sin_nulos(cls, valor: Any) -> Any:
        # Los defaults no pasan por aquí, así que un None es siempre explícito.
        if valor is None:
            raise PydanticCustomError("null_value", "Field may not be null")
        return valor

    @field_validator("time")
    @classmethod
    def hora_en_ventana(cls, valor: str) -> str:
        return _validar_hora(valor)

    def cambios(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class CambiarEstadoCommand(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: EstadoTarea


def _formatear(error: ValidationError) -> list[str]:
    mensajes = []
    for detalle in error.errors():
        ruta = ".".join(str(parte) for parte in detalle["loc"]) or "body"
        mensajes.append(f"{ruta}: {detalle['msg']}")
    return mensajes


def _validar_payload(modelo: type[BaseModel], payload: Any) -> Any:
    try:
        return modelo.model_validate(payload)
    except ValidationError as e:
        raise ValidacionFallida(_formatear(e)) from e


def validar_id(raw: Any) -> UUID:
    """
    Valida el id recibido en la ruta.

    Los ids son UUID en forma canónica con guiones (sin distinguir mayúsculas).
    Cualquier otra grafía que `UUID()` aceptaría (llaves, `urn:uuid:`,
    sin guiones) se rechaza.
    """
    if not isinstance(raw, str):
        raise ValidacionFallida(["id: ID must be a string"], MENSAJE_ID_INVALIDO)
    if not raw:
        raise ValidacionFallida(["id: ID is required"], MENSAJE_ID_INVALIDO)
    try:
        tarea_id = UUID(raw)
    except ValueError:
        tarea_id = None
    if tarea_id is None or str(tarea_id) != raw.lower():
        raise ValidacionFallida(["id: ID must be a valid UUID"], MENSAJE_ID_INVALIDO)
    return tarea_id


def validar_creacion(payload: Any) -> CrearTareaCommand:
    return _validar_payload(CrearTareaCommand, payload)


def validar_edicion(payload: Any) -> EditarTareaCommand:
    return _validar_payload(EditarTareaCommand, payload)


def validar_cambio_estado(payload: Any) -> CambiarEstadoCommand:
    return _validar_payload(CambiarEstadoCommand, payload)


def validar_estado_filtro(raw: Any) -> EstadoTarea:
    try:
        return EstadoTarea(raw)
    except ValueError:
        raise ValidacionFallida(
            [f"status: {MENSAJE_ESTADO_INVALIDO}"], MENSAJE_ESTADO_INVALIDO
        ) from None


def validar_en_conjunto(*validaciones: Callable[[], Any]) -> tuple[Any, ...]:
    """
    Ejecuta varias validaciones y acumula sus errores.

    Si alguna falla, lanza un único `ValidacionFallida` con todos los
    mensajes; el resumen es el de la primera que falló.
    """
    resultados: list[Any] = []
    errores: list[str] = []
    mensaje: str | None = None
    for validacion in validaciones:
        try:
            resultados.append(validacion())
        except ValidacionFallida as e:
            errores.extend(e.errores)
            mensaje = mensaje or e.mensaje
    if errores:
        raise ValidacionFallida(errores, mensaje or "Validation failed")
    return tuple(resultados)
