import logging
from contextlib import contextmanager
from typing import Iterator

from core.domain.errors import FalloDeAlmacenamiento

logger = logging.getLogger(__name__)


@contextmanager
def operacion_de_almacenamiento(operacion: str, mensaje: str) -> Iterator[None]:
    """
    Envuelve una llamada al repositorio.

    Cualquier excepción del almacenamiento se registra con su traza y se
    relanza como `FalloDeAlmacenamiento`, que solo expone `mensaje`.
    """
    try:
        yield
    except Exception as e:
        logger.exception(f"❌ {operacion} falló: {e}")
        raise FalloDeAlmacenamiento(operacion, mensaje) from e
