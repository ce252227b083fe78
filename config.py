# config.py
# -*- coding: utf-8 -*-
"""
Configurações centralizadas do serviço de petições
"""

import os
from dotenv import load_dotenv

# Carrega variáveis de ambiente (apenas se existir .env)
load_dotenv()

# ==================================================
# AMBIENTE
# ==================================================
ENV = os.getenv("ENV", "development")
IS_PRODUCTION = ENV == "production"

# Nível de log (DEBUG em desenvolvimento, INFO em produção)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO" if IS_PRODUCTION else "DEBUG").upper()

# ==================================================
# CONFIGURAÇÕES DE RENDERIZAÇÃO
# ==================================================
PETITION_FONT_FAMILY = os.getenv("PETITION_FONT_FAMILY", "Times New Roman")
PETITION_FONT_SIZE = int(os.getenv("PETITION_FONT_SIZE", "12"))  # pontos

# ==================================================
# CORS
# ==================================================
# Lista separada por vírgula; "*" libera qualquer origem
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
