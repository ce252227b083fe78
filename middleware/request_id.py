# middleware/request_id.py
"""
Middleware que associa um Request ID a cada requisição.

O ID é lido do header X-Request-ID (quando enviado pelo cliente) ou gerado,
fica disponível via contextvars para os processadores de log e volta no
header da response.

Uso em outros módulos:
    from middleware.request_id import get_request_id

    request_id = get_request_id()  # None fora de uma requisição
"""

import uuid
import logging
from contextvars import ContextVar
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

# Tamanho máximo aceito para IDs vindos do cliente
MAX_REQUEST_ID_LENGTH = 64

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = logging.getLogger(__name__)


def get_request_id() -> Optional[str]:
    """Retorna o Request ID da requisição atual (ou None)."""
    return _request_id_ctx.get()


def generate_request_id() -> str:
    """Gera um novo Request ID (UUID v4)."""
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware FastAPI para gerenciamento de Request ID.

    Uso:
        app.add_middleware(RequestIDMiddleware)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER)
        request_id = incoming[:MAX_REQUEST_ID_LENGTH] if incoming else generate_request_id()

        request.state.request_id = request_id
        token = _request_id_ctx.set(request_id)

        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception as e:
            # Registra e deixa a exceção propagar para os handlers de erro
            logger.error(f"[{request_id}] Erro durante requisição: {e}")
            raise
        finally:
            _request_id_ctx.reset(token)
