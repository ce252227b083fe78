# services/petition_renderer/router.py
"""
Endpoints da API de renderização e exportação de petições.
"""

import json

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from .docx_export import DocxExporter
from .exceptions import DocumentExportError
from .html_export import render_html
from .json_export import export_filename, export_json, export_text
from .models import PetitionExportRequest, RenderRequest, RenderResponse
from .renderer import petition_renderer


router = APIRouter(
    prefix="/api/petition",
    tags=["petition-renderer"],
)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@router.post(
    "/render",
    response_model=RenderResponse,
    summary="Classifica o conteúdo em blocos",
    description="""
    Classifica cada linha da petição pela cascata de regras (primeira que
    casa vence) e retorna os blocos na ordem do documento.

    **Ordem das regras:**
    0. Linha em branco (espaçador)
    1. Cabeçalho principal (EXCELENTÍSSIMO, JUIZ DE DIREITO, VARA/COMARCA)
    2. Título da ação (primeiras linhas)
    3. Títulos de seção (DOS FATOS, DO DIREITO, ...)
    4. Qualificação das partes (REQUERENTE:/REQUERIDO:)
    5. Parágrafos numerados
    6. Alíneas
    7. Fecho (Nestes termos, Pede deferimento)
    8. Local e data
    9. Assinatura
    10. Alinhamento explícito do editor
    11. Parágrafo padrão
    """
)
async def render_petition(request: RenderRequest) -> RenderResponse:
    return petition_renderer.render_document(request.content).to_response()


@router.post(
    "/render/html",
    response_class=HTMLResponse,
    summary="Pré-visualização HTML",
)
async def render_petition_html(request: RenderRequest) -> HTMLResponse:
    return HTMLResponse(render_html(request.content, request.options))


@router.post(
    "/render/text",
    response_class=PlainTextResponse,
    summary="Conteúdo em texto puro (sem marcação)",
)
async def render_petition_text(request: RenderRequest) -> PlainTextResponse:
    return PlainTextResponse(export_text(request.content))


@router.post(
    "/export/docx",
    summary="Exporta a petição em DOCX",
)
async def export_petition_docx(request: PetitionExportRequest) -> Response:
    try:
        content = DocxExporter(request.options).export(request.content, request.title)
    except DocumentExportError as e:
        raise HTTPException(status_code=500, detail=e.message)

    filename = export_filename(request.title, "docx")
    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@router.post(
    "/export/json",
    summary="Exporta a petição em JSON",
)
async def export_petition_json(request: PetitionExportRequest) -> Response:
    data = export_json(request)
    filename = export_filename(request.title, "json")
    return Response(
        content=json.dumps(data, ensure_ascii=False, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )
