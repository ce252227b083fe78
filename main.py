# main.py
"""
Serviço de Petições - Aplicação FastAPI Principal

Expõe o editor de pseudo-marcação e o classificador/renderizador de
petições. Persistência, autenticação e demais telas ficam com a aplicação
que consome este serviço.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, ENV
from middleware.request_id import RequestIDMiddleware
from services.petition_markup import petition_editor_router
from services.petition_renderer import petition_renderer_router
from utils.logging_config import setup_logging, get_logger


logger = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle events da aplicação.
    Executa na inicialização e no shutdown.
    """
    setup_logging()
    logger.info("Iniciando serviço de petições", env=ENV, version=VERSION)
    yield
    logger.info("Encerrando serviço de petições")


app = FastAPI(
    title="Serviço de Petições",
    description="Editor e renderizador de petições jurídicas",
    version=VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)


@app.get("/health")
async def health_check():
    """Health check para monitoramento"""
    return {
        "status": "ok",
        "service": "peticoes",
        "version": VERSION,
        "env": ENV,
    }


# ==================================================
# ROUTERS
# ==================================================

app.include_router(petition_editor_router)
app.include_router(petition_renderer_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=ENV != "production")
