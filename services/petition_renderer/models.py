# services/petition_renderer/models.py
"""
Modelos de dados do classificador/renderizador de petições.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from config import PETITION_FONT_FAMILY, PETITION_FONT_SIZE
from services.petition_markup.models import Alignment


class BlockKind(str, Enum):
    """
    Tipo de bloco produzido pela classificação de uma linha.

    A ordem de declaração segue a ordem de avaliação das regras.
    """
    SPACER = "spacer"
    MAIN_CAPTION = "main_caption"
    ACTION_TITLE = "action_title"
    SECTION_HEADING = "section_heading"
    PARTY_QUALIFICATION = "party_qualification"
    NUMBERED_PARAGRAPH = "numbered_paragraph"
    LETTERED_ITEM = "lettered_item"
    CLOSING_PHRASE = "closing_phrase"
    PLACE_DATE = "place_date"
    SIGNATURE = "signature"
    ALIGNED_TEXT = "aligned_text"
    PARAGRAPH = "paragraph"
    PLACEHOLDER = "placeholder"


class TextSize(str, Enum):
    """Tamanho relativo do texto do bloco."""
    SMALL = "small"
    NORMAL = "normal"
    LARGE = "large"
    XLARGE = "xlarge"


class Block(BaseModel):
    """
    Resultado da classificação de uma linha.

    `text` é o texto de exibição (sem `**` e sem wrapper de alinhamento);
    `source` é a linha aparada original, usada por exportadores que
    reaplicam ênfase inline.
    """

    kind: BlockKind
    index: Optional[int] = Field(default=None, description="Índice da linha no documento")
    text: str = ""
    source: str = ""
    align: Alignment = Alignment.JUSTIFY
    size: TextSize = TextSize.NORMAL
    bold: bool = False
    italic: bool = False
    uppercase: bool = False
    indent: bool = False
    rule_above: bool = False
    border_below: bool = False

    # Partes extraídas (qualificação das partes e itens numerados/alíneas)
    label: Optional[str] = None
    value: Optional[str] = None
    token: Optional[str] = None
    body: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ColorPalette(BaseModel):
    """Cores usadas na pré-visualização HTML."""

    text: str = Field(default="#1f2937", description="Texto de parágrafos")
    heading: str = Field(default="#111827", description="Títulos e rótulos")
    muted: str = Field(default="#6b7280", description="Textos secundários")
    rule: str = Field(default="#4b5563", description="Linha de assinatura")
    border: str = Field(default="#d1d5db", description="Borda de títulos de seção")


class RenderOptions(BaseModel):
    """
    Configuração de apresentação passada no momento da renderização.

    Não interfere na classificação; apenas em fontes e cores da saída.
    """

    font_family: str = Field(default=PETITION_FONT_FAMILY, description="Família da fonte")
    font_size: int = Field(default=PETITION_FONT_SIZE, ge=8, le=32, description="Tamanho base em pontos")
    palette: ColorPalette = Field(default_factory=ColorPalette)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "font_family": "Times New Roman",
                "font_size": 12,
                "palette": {"text": "#1f2937", "heading": "#111827"}
            }
        }
    )


@dataclass
class RenderStats:
    """Estatísticas da renderização."""

    total_lines: int = 0
    total_blocks: int = 0
    blocks_by_kind: Dict[str, int] = field(default_factory=dict)
    processing_time_ms: float = 0.0

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "total_lines": self.total_lines,
            "total_blocks": self.total_blocks,
            "blocks_by_kind": dict(self.blocks_by_kind),
            "processing_time_ms": round(self.processing_time_ms, 2),
        }


class RenderRequest(BaseModel):
    """Request para renderização via API."""

    content: str = Field(default="", description="Conteúdo da petição")
    options: Optional[RenderOptions] = Field(
        default=None,
        description="Opções de apresentação (usa padrões se não fornecido)"
    )


class RenderResponse(BaseModel):
    """Response da renderização via API."""

    blocks: List[Block] = Field(..., description="Blocos classificados, na ordem do documento")
    stats: dict = Field(..., description="Estatísticas da renderização")


@dataclass
class RenderResult:
    """Resultado completo da renderização (uso interno)."""

    blocks: List[Block]
    stats: RenderStats = field(default_factory=RenderStats)

    def to_response(self) -> RenderResponse:
        """Converte para response da API."""
        return RenderResponse(blocks=self.blocks, stats=self.stats.to_dict())


class PetitionExportRequest(BaseModel):
    """Dados da petição para exportação (DOCX/JSON)."""

    title: str = Field(default="peticao", description="Título (também nome do arquivo)")
    content: str = Field(default="", description="Conteúdo da petição")
    category: str = Field(default="", description="Categoria da petição")
    client_name: Optional[str] = Field(default=None, alias="clientName")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    options: Optional[RenderOptions] = None

    model_config = ConfigDict(populate_by_name=True)
