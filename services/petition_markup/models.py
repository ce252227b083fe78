# services/petition_markup/models.py
"""
Modelos de dados do editor de pseudo-marcação de petições.
"""

from enum import Enum
from dataclasses import dataclass
from typing import NamedTuple, Optional
from pydantic import BaseModel, Field, ConfigDict


class FormattingOperation(str, Enum):
    """
    Operações da barra de ferramentas do editor.

    - bold/italic/underline: envolvem a seleção com marcadores
    - left/center/right: alinhamento por linha (wrapper <div>)
    - h1/h2/h3, orderedList, unorderedList, quote: prefixo por linha
    """
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    ORDERED_LIST = "orderedList"
    UNORDERED_LIST = "unorderedList"
    QUOTE = "quote"

    @classmethod
    def _missing_(cls, value):
        # Aliases usados pela barra de ferramentas
        aliases = {"ol": cls.ORDERED_LIST, "ul": cls.UNORDERED_LIST}
        if isinstance(value, str):
            return aliases.get(value)
        return None


class TemplateKind(str, Enum):
    """Seções padronizadas que podem ser inseridas na petição."""
    FACTS = "facts"
    LAW = "law"
    REQUESTS = "requests"
    CLOSURE = "closure"


class Alignment(str, Enum):
    """Alinhamento horizontal de uma linha ou bloco."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class EditResult(NamedTuple):
    """Resultado de uma edição: novo conteúdo e posição do cursor."""

    content: str
    cursor: int


@dataclass(frozen=True)
class TaggedLine:
    """Linha do documento com alinhamento explícito (None = sem marcação)."""

    text: str
    align: Optional[Alignment] = None


@dataclass(frozen=True)
class DocumentMetrics:
    """Métricas exibidas no rodapé do editor."""

    lines: int = 0
    words: int = 0
    characters: int = 0

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "lines": self.lines,
            "words": self.words,
            "characters": self.characters,
        }


# =============================================================================
# Modelos da API
# =============================================================================

class FormatRequest(BaseModel):
    """Request para aplicar formatação sobre a seleção."""

    content: str = Field(default="", description="Conteúdo atual da petição")
    selection_start: int = Field(default=0, ge=0, description="Início da seleção")
    selection_end: int = Field(default=0, ge=0, description="Fim da seleção (exclusivo)")
    operation: str = Field(..., description="Operação de formatação")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "Brasília, 2024",
                "selection_start": 0,
                "selection_end": 14,
                "operation": "center"
            }
        }
    )


class TemplateRequest(BaseModel):
    """Request para inserir uma seção padronizada."""

    content: str = Field(default="", description="Conteúdo atual da petição")
    cursor_position: int = Field(default=0, ge=0, description="Posição do cursor")
    template: str = Field(..., description="Tipo de template (facts, law, requests, closure)")


class MetricsRequest(BaseModel):
    """Request para cálculo de métricas."""

    content: str = Field(default="", description="Conteúdo da petição")


class EditResponse(BaseModel):
    """Response de uma operação de edição."""

    content: str = Field(..., description="Conteúdo atualizado")
    cursor: int = Field(..., description="Nova posição do cursor")
    metrics: dict = Field(..., description="Linhas, palavras e caracteres")
