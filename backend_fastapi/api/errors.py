import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.domain.errors import FalloDeAlmacenamiento, TareaNoEncontrada, ValidacionFallida

logger = logging.getLogger(__name__)


async def _validacion_fallida(request: Request, exc: ValidacionFallida) -> JSONResponse:
    logger.info(f"⛔ {request.method} {request.url.path}: {exc.errores}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.mensaje, "errors": exc.errores},
    )


async def _request_invalida(request: Request, exc: RequestValidationError) -> JSONResponse:
    # JSON mal formado u otros errores que FastAPI detecta antes del handler.
    errores = [
        f"{'.'.join(str(parte) for parte in e['loc'])}: {e['msg']}" for e in exc.errors()
    ]
    logger.info(f"⛔ {request.method} {request.url.path}: {errores}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errores},
    )


async def _tarea_no_encontrada(request: Request, exc: TareaNoEncontrada) -> JSONResponse:
    logger.info(f"🔍 {exc}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Task not found"},
    )


async def _fallo_de_almacenamiento(
    request: Request, exc: FalloDeAlmacenamiento
) -> JSONResponse:
    # El detalle ya quedó registrado en el caso de uso.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.mensaje},
    )


def registrar_manejadores(app: FastAPI) -> None:
    app.add_exception_handler(ValidacionFallida, _validacion_fallida)
    app.add_exception_handler(RequestValidationError, _request_invalida)
    app.add_exception_handler(TareaNoEncontrada, _tarea_no_encontrada)
    app.add_exception_handler(FalloDeAlmacenamiento, _fallo_de_almacenamiento)
