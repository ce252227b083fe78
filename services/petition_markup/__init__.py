# services/petition_markup/__init__.py
"""
Editor de Pseudo-Marcação de Petições

Transforma ações da barra de ferramentas e inserção de templates em edições
de um único buffer de texto simples.

Uso básico:
    from services.petition_markup import apply_formatting, insert_template

    content, cursor = apply_formatting("Brasília, 2024", 0, 14, "center")
    content, cursor = insert_template(content, len(content), "closure")

Vocabulário de marcação:
    **negrito**, *itálico*, __sublinhado__, "# "/"## "/"### " títulos,
    "1. " / "- " listas, "> " citação e <div style="text-align: ...">
    para alinhamento.

Módulos:
    - editor: Classe PetitionEditor e singleton petition_editor
    - models: Enums, dataclasses e Pydantic models
    - patterns: Marcadores e regex pré-compilados
    - templates: Textos das seções padronizadas
    - alignment: Conversão entre wrapper <div> e linhas etiquetadas
    - draft: Rascunho em edição com salvamento delegado
    - utils: Métricas e limpeza de marcação
    - router: Endpoints FastAPI
"""

from .editor import PetitionEditor, petition_editor, apply_formatting, insert_template
from .models import (
    Alignment,
    DocumentMetrics,
    EditResult,
    FormattingOperation,
    TaggedLine,
    TemplateKind,
)
from .alignment import (
    parse_tagged_lines,
    serialize_tagged_lines,
    unwrap_line,
    wrap_line,
)
from .draft import PetitionDraft
from .templates import TEMPLATES, get_template
from .utils import clean_text, document_metrics
from .router import router as petition_editor_router


__all__ = [
    # Editor
    "PetitionEditor",
    "petition_editor",
    "apply_formatting",
    "insert_template",
    "PetitionDraft",

    # Models
    "Alignment",
    "DocumentMetrics",
    "EditResult",
    "FormattingOperation",
    "TaggedLine",
    "TemplateKind",

    # Alinhamento
    "parse_tagged_lines",
    "serialize_tagged_lines",
    "unwrap_line",
    "wrap_line",

    # Templates
    "TEMPLATES",
    "get_template",

    # Utils
    "clean_text",
    "document_metrics",

    # Router
    "petition_editor_router",
]
