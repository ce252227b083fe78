# services/petition_markup/router.py
"""
Endpoints da API do editor de petições.
"""

from fastapi import APIRouter
from typing import List

from .editor import petition_editor
from .models import (
    EditResponse,
    EditResult,
    FormatRequest,
    FormattingOperation,
    MetricsRequest,
    TemplateRequest,
)
from .templates import TEMPLATES, TEMPLATE_LABELS
from .utils import document_metrics


router = APIRouter(
    prefix="/api/petition",
    tags=["petition-editor"],
)


def _to_response(result: EditResult) -> EditResponse:
    return EditResponse(
        content=result.content,
        cursor=result.cursor,
        metrics=document_metrics(result.content).to_dict(),
    )


@router.post(
    "/format",
    response_model=EditResponse,
    summary="Aplica formatação à seleção",
    description="""
    Aplica uma operação da barra de ferramentas sobre a seleção informada.

    **Operações:** `bold`, `italic`, `underline`, `left`, `center`, `right`,
    `h1`, `h2`, `h3`, `orderedList` (`ol`), `unorderedList` (`ul`), `quote`.

    Operações desconhecidas não alteram o conteúdo.
    """
)
async def format_selection(request: FormatRequest) -> EditResponse:
    result = petition_editor.apply_formatting(
        request.content,
        request.selection_start,
        request.selection_end,
        request.operation,
    )
    return _to_response(result)


@router.post(
    "/template",
    response_model=EditResponse,
    summary="Insere seção padronizada",
)
async def insert_template(request: TemplateRequest) -> EditResponse:
    """Insere o template (facts, law, requests, closure) na posição do cursor."""
    result = petition_editor.insert_template(
        request.content,
        request.cursor_position,
        request.template,
    )
    return _to_response(result)


@router.get(
    "/templates",
    response_model=List[dict],
    summary="Lista templates disponíveis",
)
async def list_templates() -> List[dict]:
    return [
        {
            "template": kind.value,
            "label": TEMPLATE_LABELS[kind],
            "text": text,
        }
        for kind, text in TEMPLATES.items()
    ]


@router.get(
    "/operations",
    response_model=List[str],
    summary="Lista operações de formatação",
)
async def list_operations() -> List[str]:
    return [op.value for op in FormattingOperation]


@router.post(
    "/metrics",
    response_model=dict,
    summary="Métricas do conteúdo (linhas, palavras, caracteres)",
)
async def content_metrics(request: MetricsRequest) -> dict:
    return document_metrics(request.content).to_dict()
