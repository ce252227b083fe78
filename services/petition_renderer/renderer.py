# services/petition_renderer/renderer.py
"""
Classificador/renderizador de petições.

Recebe o conteúdo completo (string) e produz a sequência de blocos
estilizados, classificando cada linha de forma independente pela cascata
de regras. O renderizador não guarda estado: cada chamada refaz a
classificação do zero e nunca altera o conteúdo recebido.
"""

import time
from collections import Counter
from typing import List, Optional

from services.petition_markup.alignment import has_alignment_wrapper, unwrap_line
from services.petition_markup.models import Alignment

from utils.logging_config import get_logger

from .models import Block, BlockKind, RenderResult, RenderStats
from .patterns import (
    MARKDOWN_FENCE_LANG,
    MARKDOWN_FENCE,
    HEADER_MARKERS,
    EMPTY_DOCUMENT_TEXT,
    EMPTY_DOCUMENT_HINT,
)
from .rules import CLASSIFICATION_RULES, LineContext, build_paragraph


logger = get_logger(__name__)


def clean_residual_markdown(content: str) -> str:
    """
    Remove marcação residual antes da classificação.

    Cercas de código (```markdown / ```) e marcadores de título (#) são
    descartados e o conteúdo é aparado.
    """
    result = MARKDOWN_FENCE_LANG.sub('', content)
    result = MARKDOWN_FENCE.sub('', result)
    result = HEADER_MARKERS.sub('', result)
    return result.strip()


def placeholder_block() -> Block:
    """Bloco informativo exibido quando não há conteúdo."""
    return Block(
        kind=BlockKind.PLACEHOLDER,
        text=EMPTY_DOCUMENT_TEXT,
        body=EMPTY_DOCUMENT_HINT,
        align=Alignment.CENTER,
    )


def classify_line(
    line: str,
    index: Optional[int] = None,
    total_lines: Optional[int] = None,
) -> Block:
    """
    Classifica uma linha pela cascata de regras (primeira que casa vence).

    Args:
        line: Linha do documento (pode conter wrapper de alinhamento)
        index: Posição da linha no documento (zero-based)
        total_lines: Total de linhas do documento

    Returns:
        Block da primeira regra que casar
    """
    tagged = unwrap_line(line)
    ctx = LineContext(
        text=tagged.text.strip(),
        index=index,
        total_lines=total_lines,
        align=tagged.align,
        wrapped=has_alignment_wrapper(line),
    )

    for rule in CLASSIFICATION_RULES:
        if not rule.matches(ctx):
            continue
        block = rule.build(ctx)
        if block is None:
            continue
        # Alinhamento explícito do editor prevalece sobre o da regra
        if ctx.align is not None and block.kind != BlockKind.SPACER:
            block = block.model_copy(update={"align": ctx.align})
        return block

    return build_paragraph(ctx)


class PetitionRenderer:
    """
    Renderizador de petições em blocos classificados.

    Exemplo de uso:
        from services.petition_renderer import petition_renderer

        blocks = petition_renderer.render(conteudo)
        for block in blocks:
            print(block.kind, block.text)
    """

    def render(self, content: Optional[str]) -> List[Block]:
        """
        Classifica o conteúdo e devolve os blocos na ordem do documento.

        Conteúdo vazio, só com espaços ou que não seja string produz um
        único bloco informativo (placeholder).
        """
        return self.render_document(content).blocks

    def render_document(self, content: Optional[str]) -> RenderResult:
        """
        Renderiza o conteúdo e coleta estatísticas.

        Args:
            content: Conteúdo da petição

        Returns:
            RenderResult com blocos e estatísticas
        """
        start_time = time.perf_counter()

        cleaned = clean_residual_markdown(content) if isinstance(content, str) else ""
        if not cleaned:
            blocks = [placeholder_block()]
            lines_count = 0
        else:
            lines = cleaned.split('\n')
            lines_count = len(lines)
            blocks = [
                classify_line(line, index, lines_count)
                for index, line in enumerate(lines)
            ]

        stats = RenderStats(
            total_lines=lines_count,
            total_blocks=len(blocks),
            blocks_by_kind=dict(Counter(block.kind.value for block in blocks)),
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

        # Log métricas (sem conteúdo)
        logger.debug(
            "Petição renderizada",
            lines=stats.total_lines,
            blocks=stats.total_blocks,
            elapsed_ms=round(stats.processing_time_ms, 2),
        )

        return RenderResult(blocks=blocks, stats=stats)


# Singleton para uso direto
petition_renderer = PetitionRenderer()


def render(content: Optional[str]) -> List[Block]:
    """Atalho para `petition_renderer.render`."""
    return petition_renderer.render(content)
