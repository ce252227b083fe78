# utils/logging_config.py
"""
Configuração centralizada de logging estruturado com structlog.

BENEFÍCIOS:
- Logs em formato JSON em produção (parseable por ferramentas de observabilidade)
- Request ID automático em todos os logs
- Timestamps consistentes em UTC
- Nível de log configurável via LOG_LEVEL

USO:
    from utils.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Petição renderizada", blocks=42)

    # O request_id é adicionado automaticamente se disponível
"""

import logging
import sys
from functools import lru_cache

import structlog

from config import IS_PRODUCTION, LOG_LEVEL
from middleware.request_id import get_request_id


def add_request_id(logger, method_name: str, event_dict: dict) -> dict:
    """
    Processador structlog que adiciona request_id automaticamente.

    Obtém o request_id do ContextVar definido no middleware.
    """
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_info(logger, method_name: str, event_dict: dict) -> dict:
    """
    Adiciona informações do serviço ao log.
    """
    event_dict["service"] = "peticoes"
    return event_dict


def configure_structlog():
    """
    Configura structlog para logging estruturado.

    Em produção: JSON formatado para parsing por ferramentas
    Em desenvolvimento: Console legível
    """
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_request_id,
        add_service_info,
    ]

    if IS_PRODUCTION:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False)
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False)
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging():
    """
    Configura logging padrão do Python para integração com structlog.
    """
    root_level = getattr(logging, LOG_LEVEL, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(root_level)

    if IS_PRODUCTION:
        handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(ensure_ascii=False),
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                add_request_id,
            ],
        ))
    else:
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)
    root_logger.handlers = [handler]

    # Silencia loggers verbosos
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def setup_logging():
    """
    Função principal de configuração de logging.

    Chame esta função no início da aplicação (em main.py lifespan).
    """
    configure_stdlib_logging()
    configure_structlog()


@lru_cache(maxsize=128)
def get_logger(name: str):
    """
    Obtém um logger structlog configurado.

    Args:
        name: Nome do módulo (use __name__)

    Uso:
        logger = get_logger(__name__)
        logger.info("mensagem", chave="valor")
    """
    return structlog.get_logger(name)


# Inicializa structlog na importação
configure_structlog()


__all__ = [
    "setup_logging",
    "get_logger",
]
