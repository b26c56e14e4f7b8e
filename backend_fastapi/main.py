import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import registrar_manejadores
from backend_fastapi.api.routes.tareas import router as tareas_router
from infrastructure.logging_setup import setup_logging
from infrastructure.mongo.session.client import cerrar, conectar, inicializar_coleccion

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    # Si Mongo no responde, la excepción aborta el arranque de uvicorn.
    conectar()
    inicializar_coleccion()
    yield
    cerrar()
    logger.info("👋 Conexión con MongoDB cerrada")


app = FastAPI(title="Tareas API", lifespan=lifespan)

# Configure CORS for frontend from environment variables
cors_origins = os.getenv("CORS_ORIGINS", "*")
if cors_origins == "*":
    origins = ["*"]
else:
    origins = [origin.strip() for origin in cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true",
    allow_methods=os.getenv("CORS_ALLOW_METHODS", "*").split(","),
    allow_headers=os.getenv("CORS_ALLOW_HEADERS", "*").split(","),
)

registrar_manejadores(app)


@app.get("/", summary="Estado del servicio")
def root() -> dict[str, str]:
    return {"message": "Todo API is running"}


app.include_router(tareas_router)
