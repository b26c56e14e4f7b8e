from uuid import UUID


class ValidacionFallida(Exception):
    """Entrada mal formada o fuera de regla. Se traduce a un 400."""

    def __init__(self, errores: list[str], mensaje: str = "Validation failed") -> None:
        super().__init__(mensaje)
        self.mensaje = mensaje
        self.errores = errores


class TareaNoEncontrada(Exception):
    def __init__(self, tarea_id: UUID) -> None:
        super().__init__(f"Tarea con id {tarea_id} no encontrada")
        self.tarea_id = tarea_id


class FalloDeAlmacenamiento(Exception):
    """
    Error inesperado del almacenamiento (conexión, timeout, driver).

    `mensaje` es lo único que ve el cliente; el detalle queda en los logs.
    """

    def __init__(self, operacion: str, mensaje: str) -> None:
        super().__init__(f"{operacion}: {mensaje}")
        self.operacion = operacion
        self.mensaje = mensaje


class BaseDeDatosNoDisponible(Exception):
    pass
