# services/petition_renderer/__init__.py
"""
Classificador/Renderizador de Petições

Converte o conteúdo da petição (string) numa sequência de blocos tipados,
classificando cada linha por uma cascata ordenada de regras.

Uso básico:
    from services.petition_renderer import render

    blocks = render(conteudo)
    for block in blocks:
        print(block.kind, block.align, block.text)

Uso com exportação:
    from services.petition_renderer import render_html, export_docx, RenderOptions

    html = render_html(conteudo, RenderOptions(font_size=14))
    arquivo = export_docx(conteudo, title="Ação de Cobrança")

Módulos:
    - renderer: Classe PetitionRenderer e singleton petition_renderer
    - rules: Cascata de classificação (CLASSIFICATION_RULES)
    - models: Enums, Block e Pydantic models
    - patterns: Regex e palavras-chave das regras
    - html_export / docx_export / json_export: Exportações
    - exceptions: Erros de exportação
    - router: Endpoints FastAPI
"""

from .renderer import (
    PetitionRenderer,
    petition_renderer,
    render,
    classify_line,
    clean_residual_markdown,
)
from .rules import CLASSIFICATION_RULES, ClassificationRule, LineContext
from .models import (
    Block,
    BlockKind,
    ColorPalette,
    RenderOptions,
    RenderResult,
    RenderStats,
    TextSize,
    PetitionExportRequest,
)
from .html_export import render_html
from .docx_export import DocxExporter, export_docx
from .json_export import export_filename, export_json, export_text
from .exceptions import PetitionError, DocumentExportError
from .router import router as petition_renderer_router


__all__ = [
    # Renderizador
    "PetitionRenderer",
    "petition_renderer",
    "render",
    "classify_line",
    "clean_residual_markdown",

    # Cascata
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "LineContext",

    # Models
    "Block",
    "BlockKind",
    "ColorPalette",
    "RenderOptions",
    "RenderResult",
    "RenderStats",
    "TextSize",
    "PetitionExportRequest",

    # Exportações
    "render_html",
    "DocxExporter",
    "export_docx",
    "export_filename",
    "export_json",
    "export_text",

    # Exceções
    "PetitionError",
    "DocumentExportError",

    # Router
    "petition_renderer_router",
]
