# services/petition_renderer/json_export.py
"""
Exportação da petição em JSON e texto puro, e nomes de arquivo.
"""

import re
from datetime import datetime
from typing import Optional

from services.petition_markup.utils import clean_text
from utils.timezone import now_utc, to_iso

from .models import PetitionExportRequest


EXPORT_VERSION = "1.0"

# Qualquer caractere fora de [a-z0-9] vira "_" no nome do arquivo
FILENAME_UNSAFE = re.compile(r'[^a-z0-9]', re.IGNORECASE)


def export_filename(title: Optional[str], extension: str) -> str:
    """
    Gera o nome do arquivo exportado a partir do título.

    Ex: export_filename("Ação de Cobrança", "docx") -> "a__o_de_cobran_a.docx"
    """
    base = FILENAME_UNSAFE.sub('_', title or "peticao").lower()
    return f"{base}.{extension.lstrip('.')}"


def export_json(
    petition: PetitionExportRequest,
    exported_at: Optional[datetime] = None,
) -> dict:
    """
    Serializa a petição para o formato de exportação JSON.

    O conteúdo vai literalmente, sem nenhuma transformação.
    """
    return {
        "title": petition.title,
        "content": petition.content,
        "category": petition.category,
        "clientName": petition.client_name,
        "createdAt": petition.created_at,
        "exportedAt": to_iso(exported_at or now_utc()),
        "version": EXPORT_VERSION,
    }


def export_text(content: Optional[str]) -> str:
    """Conteúdo sem pseudo-marcação (cópia em texto puro)."""
    return clean_text(content or "")
