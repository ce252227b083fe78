# services/petition_markup/utils.py
"""
Funções utilitárias do editor de petições.
"""

from typing import Tuple

from .models import DocumentMetrics
from .patterns import (
    HEADER_MARKER,
    BOLD_MARKER,
    ITALIC_MARKER,
    UNDERLINE_MARKER,
    HTML_TAG,
    HTML_ENTITIES,
)


def count_lines(content: str) -> int:
    """Conta linhas como o editor exibe (buffer vazio tem 1 linha)."""
    return content.count('\n') + 1


def count_words(content: str) -> int:
    """Conta palavras separadas por espaço em branco (0 para buffer vazio)."""
    if not content or not content.strip():
        return 0
    return len(content.split())


def document_metrics(content: str) -> DocumentMetrics:
    """
    Calcula as métricas de exibição do editor.

    Args:
        content: Conteúdo da petição

    Returns:
        DocumentMetrics com linhas, palavras e caracteres
    """
    content = content or ""
    return DocumentMetrics(
        lines=count_lines(content),
        words=count_words(content),
        characters=len(content),
    )


def clamp_selection(content: str, start: int, end: int) -> Tuple[int, int]:
    """
    Normaliza uma seleção para o intervalo válido do conteúdo.

    Offsets são limitados a [0, len(content)] e seleções invertidas
    são trocadas.
    """
    length = len(content)
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start > end:
        start, end = end, start
    return start, end


def clean_text(text: str) -> str:
    """
    Remove a pseudo-marcação do texto para exportação em texto puro.

    Remove: títulos (#), negrito (**), itálico (*), sublinhado (__),
    tags HTML e as entidades HTML básicas.
    """
    if not text:
        return ""

    result = HEADER_MARKER.sub('', text)
    result = BOLD_MARKER.sub(r'\1', result)
    result = ITALIC_MARKER.sub(r'\1', result)
    result = UNDERLINE_MARKER.sub(r'\1', result)
    result = HTML_TAG.sub('', result)
    for entity, replacement in HTML_ENTITIES.items():
        result = result.replace(entity, replacement)

    return result.strip()
